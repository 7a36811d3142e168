"""
acts.catalog
命令目录：测试名称与说明、浏览器类型、可等待目标、move 类型对应的 CSS 选择器。
"""

from __future__ import annotations

import re
from typing import Dict, Optional

# 测试名称 -> 说明（act.what 在执行时会被替换为此说明）
TESTS: Dict[str, str] = {
    "autocom": "list inputs with their autocomplete attributes",
    "bodyText": "give the text content of the page body",
    "bulk": "report the count of visible elements",
    "focInd": "tabulate and list focusable elements with and without focus indicators",
    "focOp": "tabulate and list visible focusable and operable elements",
    "imgAlt": "list the values of the alt attributes of img elements",
    "imgBg": "show the background images and their related texts",
    "inLab": "list the inputs and their labels",
    "linkUl": "tabulate and list underlined and other inline links",
    "radioSet": "tabulate and list radio buttons in and not in accessible fieldsets",
    "roleList": "list elements having role attributes",
    "simple": "perfunctory trivial test for testing",
}

# Playwright 浏览器类型 -> 展示名（替换 exhibits 中的 __browserTypeName__）
BROWSER_TYPE_NAMES: Dict[str, str] = {
    "chromium": "Chrome",
    "firefox": "Firefox",
    "webkit": "Safari",
}

WAITABLES = ("url", "title", "body")

FOCUSABLE_TAGS = ("a", "button", "input", "select", "option")

# move 类型 -> 目标元素选择器；None 表示选择器取自 act.what
MOVES: Dict[str, Optional[str]] = {
    "text": "input[type=text]",
    "radio": "input[type=radio]",
    "checkbox": "input[type=checkbox]",
    "select": "select",
    "button": "button",
    "link": "a",
    "focus": None,
}

BROWSER_TYPE_PLACEHOLDER = "__browserTypeName__"
DIRNAME_PLACEHOLDER = "__dirname"

_URL_RE = re.compile(r"^(?:https?|file)://[^ ]+$")


def is_url(value: str) -> bool:
    """http/https/file 绝对 URL，且不含空格。"""
    return bool(_URL_RE.match(value))


def is_browser_type(value: str) -> bool:
    return value in BROWSER_TYPE_NAMES


def is_focusable(value: str) -> bool:
    return value in FOCUSABLE_TAGS


def is_test(value: str) -> bool:
    return value in TESTS


def is_waitable(value: str) -> bool:
    return value in WAITABLES


def move_selector(act: dict) -> str:
    """返回 move act 的目标选择器（focus 类型取 act.what）。"""
    selector = MOVES[act["type"]]
    return selector if selector is not None else str(act.get("what") or "")
