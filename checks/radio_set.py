"""
checks.radio_set
单选按钮是否位于可访问的分组内：最近的 fieldset 以非空 legend 开头，
且该 fieldset 内所有单选按钮同名。
"""

from __future__ import annotations

_RADIOS_JS = """
elements => elements.map(el => {
  const fieldset = el.closest('fieldset');
  let inSet = false;
  if (fieldset) {
    const first = fieldset.firstElementChild;
    const legendOk = first && first.tagName === 'LEGEND' && first.textContent.trim().length > 0;
    const names = new Set(
      Array.from(fieldset.querySelectorAll('input[type=radio]')).map(radio => radio.name)
    );
    inSet = Boolean(legendOk && names.size === 1 && el.name);
  }
  const label = el.labels && el.labels.length
    ? Array.from(el.labels).map(l => l.textContent.trim()).join(' ')
    : (el.getAttribute('aria-label') || '');
  return {inSet, name: el.name || '', label};
})
"""


async def reporter(page, with_items: bool):
    radios = await page.eval_on_selector_all("body input[type=radio]", _RADIOS_JS) or []
    in_set = [r for r in radios if r.get("inSet")]
    result = {"totals": {"total": len(radios), "inSet": len(in_set)}}
    if with_items:
        result["items"] = {
            "inSet": [r["label"] for r in in_set],
            "notInSet": [r["label"] for r in radios if not r.get("inSet")],
        }
    return {"result": result}
