"""Browser-free fakes of the Playwright objects the runner touches."""

from typing import Any, Dict, List, Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from acts.models import Report
from runner.config import RunConfig
from runner.context import RunContext


class FakeKeyboard:
    def __init__(self, page: "FakePage"):
        self.page = page
        self.presses: List[str] = []

    async def press(self, key: str) -> None:
        self.presses.append(key)
        self.page.on_key(key)


class FakeElement:
    def __init__(self, name: str = "el", options: Optional[List[str]] = None, attrs: Optional[Dict[str, str]] = None):
        self.name = name
        self.options = options or []
        self.attrs = attrs or {}
        self.selected = -1
        self.calls: List[Any] = []
        self.children: List["FakeElement"] = []
        self.on_click = None

    async def focus(self):
        self.calls.append("focus")

    async def type(self, text):
        self.calls.append(("type", text))

    async def check(self):
        self.calls.append("check")

    async def click(self):
        self.calls.append("click")
        if self.on_click is not None:
            self.on_click()

    async def get_attribute(self, name):
        return self.attrs.get(name)

    async def select_option(self, index=None):
        self.selected = index
        self.calls.append(("select", index))

    async def evaluate(self, js, arg=None):
        if "findIndex" in js:
            return next((i for i, o in enumerate(self.options) if arg in o), -1)
        return self.options[self.selected] if self.selected > -1 else ""

    async def query_selector_all(self, selector):
        return list(self.children)


class FakePage:
    """A page with `tab_stops` focusable elements in tab order and nothing else.

    Tab moves through the stops, then out of the document, then wraps to the
    first stop again. Arrow keys never move focus.
    """

    def __init__(self, url: str = "about:blank", title: str = "Fake page", tab_stops: int = 0):
        self.url = url
        self._title = title
        self.keyboard = FakeKeyboard(self)
        self.visited: List[str] = []
        self.goto_error: Optional[Exception] = None
        self.wait_error: Optional[Exception] = None
        self.wait_args: List[Any] = []
        self.candidates: List[Dict[str, Optional[str]]] = []
        self.body = FakeElement("body")
        self.body_text = ""
        self.visible_count = 0
        self.tab_stops = tab_stops
        self.focus_index = -1
        self.marks: Dict[int, str] = {}
        self.mark_calls = 0

    # navigation
    async def goto(self, url, timeout=None, wait_until=None):
        if self.goto_error is not None and url != "about:blank":
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    async def wait_for_load_state(self, state="load", timeout=None):
        return None

    async def wait_for_function(self, js, arg=None, timeout=None):
        self.wait_args.append(arg)
        if self.wait_error is not None:
            raise self.wait_error
        return True

    async def title(self):
        return self._title

    # DOM queries
    async def eval_on_selector(self, selector, js, arg=None):
        if arg is not None:
            return self.candidates
        return self.body_text

    async def eval_on_selector_all(self, selector, js, arg=None):
        return self.visible_count

    async def query_selector(self, selector):
        return self.body

    # focus walk
    def on_key(self, key: str) -> None:
        if key != "Tab" or self.tab_stops == 0:
            return
        self.focus_index += 1
        if self.focus_index >= self.tab_stops:
            self.focus_index = -1

    async def evaluate(self, js, arg=None):
        self.mark_calls += 1
        if self.focus_index < 0:
            return "external"
        if self.focus_index in self.marks:
            return "already"
        self.marks[self.focus_index] = arg
        return "new"


class FakeSession:
    def __init__(self, page: Optional[FakePage] = None, error: Optional[Exception] = None):
        self.page = page if page is not None else FakePage()
        self.error = error
        self.launched: List[str] = []
        self.closed = 0
        # pages opened in the context since launch, oldest first
        self.new_pages: List[FakePage] = []

    async def launch(self, type_name):
        if self.error is not None:
            raise self.error
        self.launched.append(type_name)
        self.new_pages = []
        return self.page

    def open_page(self, page: "FakePage") -> None:
        self.new_pages.append(page)

    async def next_page(self, timeout_ms):
        if not self.new_pages:
            raise PlaywrightTimeoutError(f"Timeout {timeout_ms}ms exceeded while waiting for a new page")
        return self.new_pages.pop(0)

    async def close(self):
        self.closed += 1


@pytest.fixture
def config(tmp_path) -> RunConfig:
    return RunConfig(
        script_dir=str(tmp_path / "scripts"),
        batch_dir=str(tmp_path / "batches"),
        report_dir=str(tmp_path / "reports"),
        base_dir="/srv/autotest",
        verbose=False,
    )


@pytest.fixture
def make_ctx(config):
    def _make(acts: List[Dict[str, Any]], session: Optional[FakeSession] = None) -> RunContext:
        report = Report(script="s1", batch="None", what="fake run", time_stamp="abc", acts=acts)
        ctx = RunContext(
            report=report,
            checkpoint_path=f"{config.report_dir}/report-abc.json",
            config=config,
            key="abc",
        )
        ctx.session = session if session is not None else FakeSession()
        return ctx

    return _make
