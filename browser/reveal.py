"""
browser.reveal
强制显示页面中被样式隐藏的元素（display:none / visibility:hidden|collapse）。
"""

from __future__ import annotations

REVEAL_JS = """
elements => {
  let count = 0;
  elements.forEach(el => {
    const style = window.getComputedStyle(el);
    let changed = false;
    if (style.display === 'none') {
      el.style.display = 'initial';
      changed = true;
    }
    if (['hidden', 'collapse'].includes(style.visibility)) {
      el.style.visibility = 'inherit';
      changed = true;
    }
    if (changed) {
      count++;
    }
  });
  return count;
}
"""


async def reveal_all(page) -> int:
    """一次批量修改 DOM，返回被强制显示的元素数。"""
    return int(await page.eval_on_selector_all("body *", REVEAL_JS) or 0)
