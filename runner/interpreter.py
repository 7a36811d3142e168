"""
Act interpreter.

Executes a report's acts strictly in order against the run's current page,
writing each act's outcome into `act["result"]` and checkpointing the whole
report after every act. One failing act never stops the run: failures become
diagnostic strings on that act and processing moves on to the next one.

Handlers are grouped by what they need:
  - PAGELESS: launch, score
  - NEEDS_PAGE: url, wait, page
  - NEEDS_URL: reveal, test and the move kinds (the page must be at a real URL)
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Dict

from playwright.async_api import Error as PlaywrightError

from acts.catalog import BROWSER_TYPE_NAMES, BROWSER_TYPE_PLACEHOLDER, DIRNAME_PLACEHOLDER, MOVES, TESTS
from acts.schema import COMMAND_SPECS, reporter_arg_names
from acts.validator import is_valid
from browser.moves import perform_move
from browser.reveal import reveal_all
from checks import get_reporter
from scorers import get_scorer

from .context import RunContext

NO_PAGE = "NO PAGE IDENTIFIED"
NO_URL = "PAGE HAS NO URL"
INVALID_TYPE = "INVALID COMMAND TYPE"
REVEALED = "All elements visible."

Handler = Callable[[RunContext, Dict[str, Any]], Awaitable[None]]

_WAIT_JS = """
act => {
  const {URL, title, body} = document;
  const success = {
    url: Boolean(body && URL && URL.includes(act.which)),
    title: Boolean(body && title && title.includes(act.which)),
    body: Boolean(body && body.textContent && body.textContent.includes(act.which))
  };
  return success[act.what];
}
"""


def invalid_result(act: Dict[str, Any]) -> str:
    return f"INVALID COMMAND OF TYPE {act.get('type')}"


async def _do_launch(ctx: RunContext, act: Dict[str, Any]) -> None:
    which = act["which"]
    try:
        ctx.page = await ctx.session.launch(which)
    except Exception as e:
        ctx.page = None
        ctx.browser_type = None
        act["result"] = f"ERROR LAUNCHING {which}: {e}"
        return
    ctx.browser_type = which
    act["result"] = f"{BROWSER_TYPE_NAMES[which]} launched"


async def _do_score(ctx: RunContext, act: Dict[str, Any]) -> None:
    try:
        scorer = get_scorer(act["which"])
        act["result"] = scorer(ctx.report.acts)
    except Exception as e:
        act["result"] = f"ERROR: {e}"


async def _do_url(ctx: RunContext, act: Dict[str, Any]) -> None:
    page = ctx.page
    resolved = act["which"].replace(DIRNAME_PLACEHOLDER, ctx.config.base_dir)
    try:
        await page.goto(resolved, timeout=ctx.config.nav_timeout_ms, wait_until=ctx.config.nav_wait_until)
        # dismiss any initial modal dialog
        await page.keyboard.press("Escape")
        act["result"] = page.url
    except PlaywrightError as e:
        try:
            await page.goto("about:blank")
        except PlaywrightError as blank_error:
            ctx.log(f"ERROR OPENING BLANK PAGE ({blank_error})")
        act["result"] = f"ERROR VISITING {resolved}: {e}"


async def _do_wait(ctx: RunContext, act: Dict[str, Any]) -> None:
    what, which = act["what"], act["which"]
    try:
        await ctx.page.wait_for_function(
            _WAIT_JS, arg={"what": what, "which": which}, timeout=ctx.config.wait_timeout_ms
        )
    except PlaywrightError as e:
        act["result"] = f'ERROR WAITING FOR {what} TO INCLUDE "{which}": {e}'
        return
    act["result"] = ctx.page.url


async def _do_page(ctx: RunContext, act: Dict[str, Any]) -> None:
    timeout = ctx.config.wait_timeout_ms
    try:
        new_page = await ctx.session.next_page(timeout)
        await new_page.wait_for_load_state("networkidle", timeout=timeout)
    except PlaywrightError as e:
        act["result"] = f"ERROR WAITING FOR NEW PAGE: {e}"
        return
    ctx.page = new_page
    act["result"] = {"url": new_page.url}


async def _do_reveal(ctx: RunContext, act: Dict[str, Any]) -> None:
    count = await reveal_all(ctx.page)
    ctx.log(f"revealed {count} elements")
    act["result"] = REVEALED


async def _do_test(ctx: RunContext, act: Dict[str, Any]) -> None:
    name = act["which"]
    act["what"] = TESTS[name]
    args = [ctx.page] + [act.get(field) for field in reporter_arg_names(name)]
    try:
        reporter = get_reporter(name)
    except (KeyError, ImportError, AttributeError) as e:
        act["result"] = f"ERROR: {e}"
        return
    started = time.perf_counter()
    try:
        test_report = await reporter(*args)
    except Exception as e:
        act["result"] = f"ERROR IN TEST {name}: {e}"
        return
    ctx.report.add_test_time(name, int(time.perf_counter() - started + 0.5))
    exhibits = test_report.get("exhibits")
    if exhibits:
        act["exhibits"] = "appended"
        type_name = BROWSER_TYPE_NAMES.get(ctx.browser_type or "", "")
        ctx.report.add_exhibits(exhibits.replace(BROWSER_TYPE_PLACEHOLDER, type_name))
    result = test_report.get("result")
    act["result"] = result if result else "NONE"


async def _do_move(ctx: RunContext, act: Dict[str, Any]) -> None:
    try:
        act["result"] = await perform_move(ctx.page, act)
    except PlaywrightError as e:
        act["result"] = f"ERROR PERFORMING {act['type']}: {e}"


PAGELESS: Dict[str, Handler] = {
    "launch": _do_launch,
    "score": _do_score,
}
NEEDS_PAGE: Dict[str, Handler] = {
    "url": _do_url,
    "wait": _do_wait,
    "page": _do_page,
}
NEEDS_URL: Dict[str, Handler] = {
    "reveal": _do_reveal,
    "test": _do_test,
}
NEEDS_URL.update({kind: _do_move for kind in MOVES})

HANDLERS: Dict[str, Handler] = {**PAGELESS, **NEEDS_PAGE, **NEEDS_URL}

_unhandled = set(COMMAND_SPECS) - set(HANDLERS)
if _unhandled:
    raise RuntimeError(f"command types without a handler: {sorted(_unhandled)}")


async def perform_act(ctx: RunContext, act: Dict[str, Any]) -> None:
    """Run one act and record its outcome in act["result"]."""
    if not is_valid(act):
        act["result"] = invalid_result(act)
        return
    kind = act["type"]
    if kind in PAGELESS:
        await PAGELESS[kind](ctx, act)
        return
    if ctx.page is None:
        act["result"] = NO_PAGE
        return
    if kind in NEEDS_PAGE:
        await NEEDS_PAGE[kind](ctx, act)
        return
    url = ctx.page_url()
    if not url or url == "about:blank":
        act["result"] = NO_URL
        return
    act["url"] = url
    handler = NEEDS_URL.get(kind)
    if handler is None:
        act["result"] = INVALID_TYPE
        return
    await handler(ctx, act)


async def do_acts(ctx: RunContext) -> None:
    """Perform every act of the report in order, checkpointing after each one."""
    acts = ctx.report.acts
    for index, act in enumerate(acts):
        ctx.log(f"act {index + 1}/{len(acts)} type={act.get('type')} which={act.get('which')}")
        try:
            await perform_act(ctx, act)
        except Exception as e:
            ctx.log(f"act {index + 1} failed: {type(e).__name__}: {e}")
            act["result"] = f"ERROR: {e}"
        ctx.checkpoint()


__all__ = ["HANDLERS", "perform_act", "do_acts", "invalid_result", "NO_PAGE", "NO_URL", "INVALID_TYPE"]
