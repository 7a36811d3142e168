import asyncio

from browser.resolver import match_index, resolve_element
from conftest import FakeElement, FakePage


def _cand(**values):
    base = {"text": None, "ariaLabel": None, "labels": None, "labelledBy": None, "placeholder": None}
    base.update(values)
    return base


def test_first_match_wins():
    cands = [_cand(text="Cancel"), _cand(text="Submit order"), _cand(text="Submit")]
    assert match_index(cands, "Submit") == 1


def test_match_by_other_sources():
    cands = [
        _cand(text=""),
        _cand(ariaLabel="Search the site"),
        _cand(labels="Email address"),
        _cand(labelledBy="Billing Zip"),
        _cand(placeholder="dd/mm/yyyy"),
    ]
    assert match_index(cands, "Search") == 1
    assert match_index(cands, "Email") == 2
    assert match_index(cands, "Zip") == 3
    assert match_index(cands, "yyyy") == 4


def test_absent_sources_do_not_match():
    assert match_index([_cand()], "anything") == -1


def test_no_candidates():
    assert match_index([], "x") == -1


def test_resolve_element_returns_handle():
    page = FakePage(url="https://example.com/")
    page.candidates = [_cand(text="One"), _cand(text="Two")]
    first, second = FakeElement("one"), FakeElement("two")
    page.body.children = [first, second]
    assert asyncio.run(resolve_element(page, "button", "Two")) is second
    assert asyncio.run(resolve_element(page, "button", "Three")) is None
