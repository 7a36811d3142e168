"""
checks.bulk
统计 body 内可见元素数量（非空包围盒且 visibility 非 hidden）。
"""

from __future__ import annotations

_COUNT_VISIBLE_JS = """
elements => elements.filter(el => {
  const style = window.getComputedStyle(el);
  return el.getClientRects().length > 0 && style.visibility !== 'hidden';
}).length
"""


async def reporter(page):
    count = await page.eval_on_selector_all("body *", _COUNT_VISIBLE_JS)
    return {"result": {"visibleElements": int(count or 0)}}
