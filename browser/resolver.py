"""
browser.resolver
将人类可读的文本映射到某类元素中的序号（元素定位）。

页面端一次性采集候选元素（body 下、按 DOM 顺序）的文本来源：
  text（textContent）、ariaLabel、labels（关联 <label> 文本拼接）、
  labelledBy（aria-labelledby 引用元素文本拼接）、placeholder。
匹配逻辑在 Python 端完成（match_index），便于单测。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

SOURCE_KEYS = ("text", "ariaLabel", "labels", "labelledBy", "placeholder")

_COLLECT_JS = """
(body, selector) => Array.from(body.querySelectorAll(selector)).map(el => {
  const attr = name => el.hasAttribute(name) ? el.getAttribute(name) : null;
  const labels = el.labels && el.labels.length
    ? Array.from(el.labels).map(label => label.textContent).join(' ')
    : null;
  const ids = attr('aria-labelledby');
  let labelledBy = null;
  if (ids !== null) {
    labelledBy = ids.split(/\\s+/)
      .map(id => document.getElementById(id))
      .filter(ref => ref)
      .map(ref => ref.textContent)
      .join(' ');
  }
  return {
    text: el.textContent,
    ariaLabel: attr('aria-label'),
    labels,
    labelledBy,
    placeholder: attr('placeholder')
  };
})
"""


def matches(candidate: Dict[str, Optional[str]], text: str) -> bool:
    """任一存在的文本来源包含 text 即匹配；缺失的来源不影响其它来源。"""
    for key in SOURCE_KEYS:
        value = candidate.get(key)
        if value is not None and text in value:
            return True
    return False


def match_index(candidates: List[Dict[str, Optional[str]]], text: str) -> int:
    """返回第一个匹配候选的 0 基序号；无候选或无匹配返回 -1。"""
    for i, candidate in enumerate(candidates):
        if matches(candidate, text):
            return i
    return -1


async def collect_candidates(page, selector: str) -> List[Dict[str, Any]]:
    return await page.eval_on_selector("body", _COLLECT_JS, selector) or []


async def resolve_index(page, selector: str, text: str) -> int:
    """页面中 selector 类元素里第一个匹配 text 的序号，或 -1。"""
    return match_index(await collect_candidates(page, selector), text)


async def resolve_element(page, selector: str, text: str):
    """返回匹配元素的 ElementHandle；未找到返回 None。"""
    index = await resolve_index(page, selector, text)
    if index < 0:
        return None
    body = await page.query_selector("body")
    if body is None:
        return None
    handles = await body.query_selector_all(selector)
    if index >= len(handles):
        return None
    return handles[index]


__all__ = ["SOURCE_KEYS", "matches", "match_index", "collect_candidates", "resolve_index", "resolve_element"]
