"""
Keyboard focus traversal.

Presses real navigation keys and marks every element that receives focus with
a `data-autotest-focused` attribute whose value is the key that reached it.
Rotating Tab / ArrowRight / ArrowDown covers both native tab stops and widgets
with roving tabindex that move focus on arrow keys instead of Tab.

The walk stops when:
  - a Tab lands on an element that is already marked, or
  - focus leaves the document EXTERNAL_LIMIT times in a row.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

FOCUS_MARKER = "data-autotest-focused"
EXTERNAL_LIMIT = 3

# last key -> (next key after a new focus, next key after a refocus)
NEXT_NAV_KEYS: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Tab": ("ArrowRight", None),
    "ArrowRight": ("ArrowDown", "ArrowDown"),
    "ArrowDown": ("ArrowDown", "Tab"),
}

_MARK_JS = """
lastNavKey => {
  const focus = document.activeElement;
  if (! focus || focus === document.body || focus === document.documentElement) {
    return 'external';
  }
  if (focus.hasAttribute('%s')) {
    return 'already';
  }
  focus.setAttribute('%s', lastNavKey);
  return 'new';
}
""" % (FOCUS_MARKER, FOCUS_MARKER)


def next_key(last_key: str, status: str) -> Optional[str]:
    new_key, again_key = NEXT_NAV_KEYS[last_key]
    return again_key if status == "already" else new_key


async def mark_focusable(page) -> Dict[str, object]:
    """Walk the page's keyboard focus order, marking each reached element once."""
    by_key = {key: 0 for key in NEXT_NAV_KEYS}
    presses = 0
    marked = 0
    external_count = 0

    last_key = "Tab"
    await page.keyboard.press(last_key)
    presses += 1
    while True:
        status = await page.evaluate(_MARK_JS, last_key)
        if status == "external":
            external_count += 1
            if external_count >= EXTERNAL_LIMIT:
                break
            last_key = "Tab"
        else:
            external_count = 0
            if status == "new":
                marked += 1
                by_key[last_key] += 1
            key = next_key(last_key, status)
            if key is None:
                break
            last_key = key
        await page.keyboard.press(last_key)
        presses += 1
    return {"marked": marked, "presses": presses, "byKey": by_key}


__all__ = ["FOCUS_MARKER", "EXTERNAL_LIMIT", "NEXT_NAV_KEYS", "next_key", "mark_focusable"]
