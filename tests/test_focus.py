import asyncio

from browser.focus import EXTERNAL_LIMIT, mark_focusable, next_key
from conftest import FakePage


def test_empty_body_stops_after_external_limit():
    page = FakePage(url="https://example.com/")
    stats = asyncio.run(mark_focusable(page))
    assert stats["presses"] == EXTERNAL_LIMIT == 3
    assert page.keyboard.presses == ["Tab", "Tab", "Tab"]
    assert stats["marked"] == 0


def test_each_element_marked_once_by_tab():
    page = FakePage(url="https://example.com/", tab_stops=4)
    stats = asyncio.run(mark_focusable(page))
    assert stats["marked"] == 4
    assert page.marks == {0: "Tab", 1: "Tab", 2: "Tab", 3: "Tab"}
    assert stats["byKey"] == {"Tab": 4, "ArrowRight": 0, "ArrowDown": 0}
    # ends on the Tab that wraps back onto the first marked element
    assert page.keyboard.presses[-1] == "Tab"
    assert page.focus_index == 0


def test_next_key_rotation():
    assert next_key("Tab", "new") == "ArrowRight"
    assert next_key("Tab", "already") is None
    assert next_key("ArrowRight", "already") == "ArrowDown"
    assert next_key("ArrowDown", "new") == "ArrowDown"
    assert next_key("ArrowDown", "already") == "Tab"
