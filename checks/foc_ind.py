"""
checks.foc_ind

Focus indicators of keyboard-reachable elements.

The focus traversal marks every element reachable by Tab/arrow keys; each
marked element is then blurred and refocused and its computed style compared:
  - outlinePresent: a non-zero outline while focused
  - nonOutlinePresent: no outline, but some other style changed on focus
  - indicatorMissing: nothing visible changed
"""

from __future__ import annotations

from typing import Any, Dict, List

from browser.focus import FOCUS_MARKER, mark_focusable
from browser.reveal import reveal_all

_INDICATORS_JS = """
async delay => {
  const props = [
    'outlineStyle', 'outlineWidth', 'outlineColor', 'boxShadow', 'borderColor',
    'borderStyle', 'borderWidth', 'backgroundColor', 'color', 'textDecorationLine'
  ];
  const snap = el => {
    const style = window.getComputedStyle(el);
    return props.map(prop => style[prop]);
  };
  const pause = () => new Promise(resolve => setTimeout(resolve, delay));
  const items = {indicatorMissing: [], outlinePresent: [], nonOutlinePresent: []};
  const elements = Array.from(document.querySelectorAll('[%s]'));
  for (const el of elements) {
    el.blur();
    const before = snap(el);
    el.focus();
    if (delay > 0) {
      await pause();
    }
    const style = window.getComputedStyle(el);
    const after = snap(el);
    const item = {
      tagName: el.tagName,
      text: (el.textContent || el.getAttribute('aria-label') || '').trim().slice(0, 100)
    };
    if (style.outlineStyle !== 'none' && style.outlineWidth !== '0px') {
      items.outlinePresent.push(item);
    }
    else if (after.some((value, index) => value !== before[index])) {
      items.nonOutlinePresent.push(item);
    }
    else {
      items.indicatorMissing.push(item);
    }
  }
  return items;
}
""" % FOCUS_MARKER


def _type_totals(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    tag_names: Dict[str, int] = {}
    for item in items:
        tag = str(item.get("tagName") or "")
        tag_names[tag] = tag_names.get(tag, 0) + 1
    return {"total": len(items), "tagNames": tag_names}


async def reporter(page, reveal_all_first: bool, allowed_delay: float, with_items: bool):
    if reveal_all_first:
        await reveal_all(page)
    walk = await mark_focusable(page)
    items = await page.evaluate(_INDICATORS_JS, max(0, int(allowed_delay or 0))) or {}
    types = {name: _type_totals(items.get(name) or []) for name in ("indicatorMissing", "outlinePresent", "nonOutlinePresent")}
    result: Dict[str, Any] = {
        "totals": {
            "total": sum(t["total"] for t in types.values()),
            "types": types,
        },
        "walk": walk,
    }
    if with_items:
        result["items"] = items
    return {"result": result}
