"""
checks.img_bg
列出 body 内元素的背景图片 URL，并生成 exhibits 片段（图片列表）。
"""

from __future__ import annotations

import html

from acts.catalog import BROWSER_TYPE_PLACEHOLDER

_BG_URLS_JS = """
elements => elements
  .map(el => window.getComputedStyle(el).getPropertyValue('background-image'))
  .filter(value => value && value.startsWith('url('))
  .map(value => value.slice(4, -1).replace(/^["']|["']$/g, ''))
"""


async def reporter(page):
    urls = await page.eval_on_selector_all("body *", _BG_URLS_JS) or []
    if urls:
        items = "\n".join(f'  <li><img src="{html.escape(u, quote=True)}" alt=""></li>' for u in urls)
    else:
        items = "  <li>NONE</li>"
    exhibits = "\n".join([
        f"<h2>Background images ({BROWSER_TYPE_PLACEHOLDER})</h2>",
        "<ul>",
        items,
        "</ul>",
    ])
    return {"result": {"total": len(urls), "urls": urls}, "exhibits": exhibits}
