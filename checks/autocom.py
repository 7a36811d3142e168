"""
checks.autocom
列出文本类输入框及其 autocomplete 属性。
"""

from __future__ import annotations

from typing import Any, Dict, List

_INPUTS_JS = """
elements => elements
  .filter(el => ! ['hidden', 'submit', 'reset', 'button', 'image', 'checkbox', 'radio', 'file'].includes(el.type))
  .map(el => ({
    type: el.type || 'text',
    name: el.getAttribute('name') || '',
    autocomplete: el.hasAttribute('autocomplete') ? el.getAttribute('autocomplete') : null,
    label: el.labels && el.labels.length
      ? Array.from(el.labels).map(label => label.textContent.trim()).join(' ')
      : (el.getAttribute('aria-label') || '')
  }))
"""


async def reporter(page):
    items: List[Dict[str, Any]] = await page.eval_on_selector_all("body input", _INPUTS_JS) or []
    with_attr = sum(1 for item in items if item.get("autocomplete"))
    return {
        "result": {
            "totals": {"inputs": len(items), "withAutocomplete": with_attr},
            "items": items,
        }
    }
