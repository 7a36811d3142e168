from __future__ import annotations

from typing import Any, Dict, Union

from acts.catalog import move_selector

from .resolver import resolve_element

NOT_FOUND = "NOT FOUND"
OPTION_NOT_FOUND = "OPTION NOT FOUND"

_OPTION_INDEX_JS = (
    "(el, what) => Array.from(el.options || []).findIndex(o => (o.textContent || '').includes(what))"
)
_SELECTED_TEXT_JS = (
    "el => el.selectedIndex > -1 && el.options[el.selectedIndex] ? el.options[el.selectedIndex].textContent : ''"
)


async def _select(element, what: str) -> str:
    index = await element.evaluate(_OPTION_INDEX_JS, what)
    if index is None or index < 0:
        return OPTION_NOT_FOUND
    await element.select_option(index=int(index))
    text = await element.evaluate(_SELECTED_TEXT_JS)
    return f"“{text}” selected" if text else OPTION_NOT_FOUND


async def perform_move(page, act: Dict[str, Any]) -> Union[str, Dict[str, str]]:
    """Locate the move's target by text, focus it, then act on it by kind.

    Returns the act result. An unresolved target yields NOT_FOUND rather than
    raising; Playwright errors during the interaction propagate to the caller.
    """
    kind = act["type"]
    element = await resolve_element(page, move_selector(act), act["which"])
    if element is None:
        return NOT_FOUND
    await element.focus()
    if kind == "focus":
        return "focused"
    if kind == "text":
        await element.type(act["what"])
        return "entered"
    if kind in ("radio", "checkbox"):
        await element.check()
        return "checked"
    if kind == "select":
        return await _select(element, act["what"])
    if kind == "button":
        await element.click()
        return "clicked"
    if kind == "link":
        href = await element.get_attribute("href")
        target = await element.get_attribute("target")
        await element.click()
        return {"href": href or "NONE", "target": target or "NONE", "move": "clicked"}
    raise ValueError(f"not a move kind: {kind}")


__all__ = ["NOT_FOUND", "OPTION_NOT_FOUND", "perform_move"]
