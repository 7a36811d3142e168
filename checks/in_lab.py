"""
checks.in_lab
列出表单控件及其可访问标签（label / aria-label / aria-labelledby）。
"""

from __future__ import annotations

_LABELS_JS = """
elements => elements
  .filter(el => el.type !== 'hidden')
  .map(el => {
    const texts = [];
    if (el.labels) {
      Array.from(el.labels).forEach(label => texts.push(label.textContent.trim()));
    }
    if (el.hasAttribute('aria-label')) {
      texts.push(el.getAttribute('aria-label').trim());
    }
    if (el.hasAttribute('aria-labelledby')) {
      el.getAttribute('aria-labelledby').split(/\\s+/).forEach(id => {
        const ref = document.getElementById(id);
        if (ref) {
          texts.push(ref.textContent.trim());
        }
      });
    }
    return {
      tagName: el.tagName,
      type: el.type || '',
      id: el.id || '',
      labels: texts.filter(text => text)
    };
  })
"""


async def reporter(page):
    items = await page.eval_on_selector_all("body input, body select, body textarea", _LABELS_JS) or []
    unlabeled = sum(1 for item in items if not item.get("labels"))
    return {"result": {"total": len(items), "unlabeled": unlabeled, "items": items}}
