from __future__ import annotations


async def reporter(page):
    text = await page.eval_on_selector("body", "body => body.textContent")
    return {"result": {"bodyText": text or ""}}
