"""
Playwright-backed browser session owned by exactly one script run.

A run's `launch` act closes whatever browser the session currently holds and
starts a fresh browser + context + page of the requested type. The session
never shares its browser with another run; batch hosts each get their own.

Pages opened later in the context (target=_blank links, window.open) are
queued as they appear, so a `page` act adopts a tab even when the click that
opened it finished before the act started.

Usage:
  async with async_playwright() as pw:
      session = BrowserSession(pw, headless=True, log=print)
      page = await session.launch("chromium")
      ...
      popup = await session.next_page(20000)
      await session.close()
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class BrowserSession:
    def __init__(
        self,
        pw: Playwright,
        *,
        headless: bool = True,
        slow_mo: int = 0,
        log: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._pw = pw
        self._headless = headless
        self._slow_mo = max(0, int(slow_mo or 0))
        self._log = log
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._opening_page: Optional[Page] = None
        self._new_pages: Optional[asyncio.Queue] = None

    def _on_page(self, page: Page) -> None:
        if self._new_pages is not None:
            self._new_pages.put_nowait(page)
        if self._log is None:
            return
        log = self._log
        page.on("console", lambda msg: log(f"[console] {msg.text}"))

    async def launch(self, type_name: str) -> Page:
        """Close any browser of this session, then open a new page of `type_name`."""
        browser_type = getattr(self._pw, type_name, None)
        if browser_type is None:
            raise ValueError(f"unknown browser type: {type_name}")
        await self.close()
        self._new_pages = asyncio.Queue()
        self._browser = await browser_type.launch(headless=self._headless, slow_mo=self._slow_mo)
        self._context = await self._browser.new_context()
        self._context.on("page", self._on_page)
        page = await self._context.new_page()
        self._opening_page = page
        await page.wait_for_load_state("networkidle")
        return page

    async def next_page(self, timeout_ms: int) -> Page:
        """Next page opened in this session's context after launch.

        Returns at once if one is already queued; otherwise waits up to
        `timeout_ms` and raises Playwright's TimeoutError.
        """
        if self._new_pages is None:
            raise PlaywrightTimeoutError("no browser launched in this session")
        while True:
            try:
                page = await asyncio.wait_for(self._new_pages.get(), timeout=timeout_ms / 1000)
            except asyncio.TimeoutError:
                raise PlaywrightTimeoutError(f"Timeout {timeout_ms}ms exceeded while waiting for a new page")
            # the page created by launch() itself fires the same event
            if page is not self._opening_page:
                return page

    async def close(self) -> None:
        browser, self._browser, self._context = self._browser, None, None
        self._opening_page = None
        self._new_pages = None
        if browser is None:
            return
        try:
            await browser.close()
        except Exception as e:
            if self._log is not None:
                self._log(f"[session] browser close failed: {e}")
