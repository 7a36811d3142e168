"""
checks.link_ul
行内链接（与父元素其它文本并列）中带下划线与不带下划线的数量。
"""

from __future__ import annotations

_LINKS_JS = """
elements => elements.map(el => {
  const style = window.getComputedStyle(el);
  const text = el.textContent.trim();
  const parentText = el.parentElement ? el.parentElement.textContent.trim() : text;
  return {
    text: text.slice(0, 100),
    inline: style.display === 'inline' && parentText.length > text.length,
    underlined: style.textDecorationLine.includes('underline')
  };
})
"""


async def reporter(page, with_items: bool):
    links = await page.eval_on_selector_all("body a", _LINKS_JS) or []
    inline = [link for link in links if link.get("inline")]
    underlined = [link for link in inline if link.get("underlined")]
    result = {
        "totals": {
            "links": len(links),
            "inline": {"total": len(inline), "underlined": len(underlined)},
        }
    }
    if with_items:
        result["items"] = {
            "underlined": [link["text"] for link in underlined],
            "notUnderlined": [link["text"] for link in inline if not link.get("underlined")],
        }
    return {"result": result}
