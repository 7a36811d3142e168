"""In-page scripts run against real Chromium pages built with set_content."""

import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from browser.focus import FOCUS_MARKER, mark_focusable
from browser.resolver import resolve_element, resolve_index
from browser.reveal import reveal_all
from browser.session import BrowserSession
from checks.bulk import reporter as bulk_reporter


def on_page(markup, action):
    """Load `markup` into a fresh Chromium page and return `await action(page)`."""

    async def main():
        async with async_playwright() as pw:
            try:
                browser = await pw.chromium.launch()
            except PlaywrightError as e:
                pytest.skip(f"chromium not available: {e}")
            try:
                page = await browser.new_page()
                await page.set_content(markup)
                return await action(page)
            finally:
                await browser.close()

    return asyncio.run(main())


def test_resolver_matches_second_by_aria_label():
    markup = """
    <button>Close</button>
    <button aria-label="Search the site">Go</button>
    <button>Help</button>
    """
    assert on_page(markup, lambda page: resolve_index(page, "button", "Search")) == 1


def test_resolver_sources_and_missing_labelledby_ids():
    markup = """
    <span id="zip">Billing Zip</span>
    <label for="email">Email address</label>
    <input type="text" id="email">
    <input type="text" aria-labelledby="nosuch zip">
    <input type="text" placeholder="dd/mm/yyyy">
    """

    async def action(page):
        return [
            await resolve_index(page, "input[type=text]", "Email"),
            await resolve_index(page, "input[type=text]", "Zip"),
            await resolve_index(page, "input[type=text]", "yyyy"),
            await resolve_index(page, "input[type=text]", "Phone"),
        ]

    assert on_page(markup, action) == [0, 1, 2, -1]


def test_resolve_element_returns_matching_handle():
    markup = '<a href="#a">First</a><a href="#b">Second</a>'

    async def action(page):
        element = await resolve_element(page, "a", "Second")
        return await element.get_attribute("href")

    assert on_page(markup, action) == "#b"


def test_bulk_counts_visible_elements():
    visible = "<div>x</div>" * 42
    hidden = '<div style="display:none">h</div><p style="visibility:hidden">h</p>'
    report = on_page(visible + hidden, bulk_reporter)
    assert report == {"result": {"visibleElements": 42}}


def test_reveal_makes_hidden_elements_visible():
    markup = '<div>shown</div><div style="display:none">a</div><p style="visibility:hidden">b</p>'

    async def action(page):
        before = (await bulk_reporter(page))["result"]["visibleElements"]
        revealed = await reveal_all(page)
        after = (await bulk_reporter(page))["result"]["visibleElements"]
        return before, revealed, after

    assert on_page(markup, action) == (1, 2, 3)


def test_focus_walk_marks_each_element_once():
    markup = "<button>a</button><a href='#b'>b</a><input type='text'><button>d</button>"

    async def action(page):
        stats = await mark_focusable(page)
        marked = await page.eval_on_selector_all(f"[{FOCUS_MARKER}]", "els => els.length")
        return stats, marked

    stats, marked = on_page(markup, action)
    assert stats["marked"] == 4
    assert marked == 4


def test_focus_walk_on_empty_body():
    stats = on_page("<p>No controls here</p>", mark_focusable)
    assert stats["marked"] == 0
    assert stats["presses"] == 3


def test_session_queues_tab_opened_before_waiting():
    async def main():
        async with async_playwright() as pw:
            session = BrowserSession(pw)
            try:
                page = await session.launch("chromium")
            except PlaywrightError as e:
                pytest.skip(f"chromium not available: {e}")
            try:
                await page.set_content('<a href="about:blank#popup" target="_blank">Open</a>')
                await page.click("a")
                # give the click time to open the tab before anyone waits for it
                await asyncio.sleep(0.5)
                popup = await session.next_page(5000)
                return popup is not page, popup in page.context.pages
            finally:
                await session.close()

    assert asyncio.run(main()) == (True, True)
