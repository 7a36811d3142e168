"""
checks.foc_op
可见元素中“可聚焦”（键盘遍历可达）与“可操作”（原生控件 / onclick / 交互 role / 指针光标）的对照。
"""

from __future__ import annotations

from typing import Any, Dict

from browser.focus import FOCUS_MARKER, mark_focusable

_OPERABLE_JS = """
elements => {
  const operableTags = ['A', 'BUTTON', 'INPUT', 'SELECT', 'TEXTAREA', 'OPTION'];
  const operableRoles = ['button', 'link', 'checkbox', 'radio', 'tab', 'menuitem', 'option', 'switch'];
  const out = {focusableOperable: [], focusableNotOperable: [], operableNotFocusable: []};
  elements.forEach(el => {
    if (! el.getClientRects().length) {
      return;
    }
    const style = window.getComputedStyle(el);
    if (style.visibility === 'hidden') {
      return;
    }
    const parent = el.parentElement;
    const inheritedPointer = parent && window.getComputedStyle(parent).cursor === 'pointer';
    const operable = operableTags.includes(el.tagName)
      || el.hasAttribute('onclick')
      || operableRoles.includes(el.getAttribute('role'))
      || (style.cursor === 'pointer' && ! inheritedPointer);
    const focusable = el.hasAttribute('%s');
    const item = {tagName: el.tagName, text: el.textContent.trim().slice(0, 100)};
    if (focusable && operable) {
      out.focusableOperable.push(item);
    }
    else if (focusable) {
      out.focusableNotOperable.push(item);
    }
    else if (operable) {
      out.operableNotFocusable.push(item);
    }
  });
  return out;
}
""" % FOCUS_MARKER


async def reporter(page, with_items: bool):
    await mark_focusable(page)
    items: Dict[str, Any] = await page.eval_on_selector_all("body *", _OPERABLE_JS) or {}
    totals = {name: {"total": len(items.get(name) or [])} for name in ("focusableOperable", "focusableNotOperable", "operableNotFocusable")}
    result: Dict[str, Any] = {"totals": totals}
    if with_items:
        result["items"] = items
    return {"result": result}
