from __future__ import annotations

from typing import List, Optional

_ROLES_JS = """
elements => elements.map((el, index) => [index, el.tagName.toLowerCase(), el.getAttribute('role')])
"""


async def reporter(page, roles: Optional[List[str]] = None):
    """Elements carrying a role attribute, optionally only the given roles."""
    items = await page.eval_on_selector_all("body [role]", _ROLES_JS) or []
    if roles:
        items = [item for item in items if item[2] in roles]
    return {"result": {"total": len(items), "items": items}}
