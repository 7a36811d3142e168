"""Perfunctory check used to exercise the test act itself."""

from __future__ import annotations


async def reporter(page):
    return {"result": {"title": await page.title()}}
