from __future__ import annotations

_IMGS_JS = """
elements => elements.map(el => ({
  src: el.getAttribute('src') || '',
  alt: el.hasAttribute('alt') ? el.getAttribute('alt') : null
}))
"""


async def reporter(page):
    items = await page.eval_on_selector_all("body img", _IMGS_JS) or []
    missing = sum(1 for item in items if item.get("alt") is None)
    return {"result": {"total": len(items), "altMissing": missing, "items": items}}
