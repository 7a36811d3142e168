"""
acts.schema

Declarative field schema for every command type, plus the extra fields that
individual tests declare. The validator merges the two at validation time.

A FieldSpec is (required, kind, check):
  - kind: "string" | "array" | "boolean" | "number"
  - check: optional name of a subtype check in SUBTYPE_CHECKS
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .catalog import is_browser_type, is_focusable, is_test, is_url, is_waitable


@dataclass(frozen=True)
class FieldSpec:
    required: bool
    kind: str
    check: Optional[str] = None


FieldSpecs = Dict[str, FieldSpec]


def _has_length(value: Any) -> bool:
    return len(value) > 0


def _are_strings(value: Any) -> bool:
    return all(isinstance(item, str) for item in value)


SUBTYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "has_length": _has_length,
    "is_url": is_url,
    "is_browser_type": is_browser_type,
    "is_focusable": is_focusable,
    "is_test": is_test,
    "is_waitable": is_waitable,
    "are_strings": _are_strings,
}


def has_kind(value: Any, kind: str) -> bool:
    """Primitive type check. bool is not a number here."""
    if kind == "string":
        return isinstance(value, str)
    if kind == "array":
        return isinstance(value, list)
    if kind == "boolean":
        return isinstance(value, bool)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return False


def has_check(value: Any, check: Optional[str]) -> bool:
    if not check:
        return True
    fn = SUBTYPE_CHECKS.get(check)
    if fn is None:
        return False
    return bool(fn(value))


_OPT_WHAT = FieldSpec(False, "string")
_MOVE_TARGET = FieldSpec(True, "string", "has_length")

COMMAND_SPECS: Dict[str, FieldSpecs] = {
    "launch": {
        "which": FieldSpec(True, "string", "is_browser_type"),
        "what": _OPT_WHAT,
    },
    "url": {
        "which": FieldSpec(True, "string", "is_url"),
        "what": _OPT_WHAT,
    },
    "wait": {
        "which": FieldSpec(True, "string", "has_length"),
        "what": FieldSpec(True, "string", "is_waitable"),
    },
    "page": {
        "what": _OPT_WHAT,
    },
    "reveal": {
        "what": _OPT_WHAT,
    },
    "test": {
        "which": FieldSpec(True, "string", "is_test"),
        "what": _OPT_WHAT,
    },
    "text": {
        "which": _MOVE_TARGET,
        "what": FieldSpec(True, "string"),
    },
    "radio": {
        "which": _MOVE_TARGET,
        "what": _OPT_WHAT,
    },
    "checkbox": {
        "which": _MOVE_TARGET,
        "what": _OPT_WHAT,
    },
    "select": {
        "which": _MOVE_TARGET,
        "what": FieldSpec(True, "string", "has_length"),
    },
    "button": {
        "which": _MOVE_TARGET,
        "what": _OPT_WHAT,
    },
    "link": {
        "which": _MOVE_TARGET,
        "what": _OPT_WHAT,
    },
    "focus": {
        "which": _MOVE_TARGET,
        "what": FieldSpec(True, "string", "is_focusable"),
    },
    "score": {
        "which": FieldSpec(True, "string", "has_length"),
        "what": _OPT_WHAT,
    },
}

_WITH_ITEMS = FieldSpec(True, "boolean")

# Declaration order is the order of the reporter's extra arguments.
TEST_SPECS: Dict[str, FieldSpecs] = {
    "radioSet": {"withItems": _WITH_ITEMS},
    "linkUl": {"withItems": _WITH_ITEMS},
    "focOp": {"withItems": _WITH_ITEMS},
    "focInd": {
        "revealAll": FieldSpec(True, "boolean"),
        "allowedDelay": FieldSpec(True, "number"),
        "withItems": _WITH_ITEMS,
    },
    "roleList": {"roles": FieldSpec(False, "array", "are_strings")},
}


def reporter_arg_names(test_name: str) -> list[str]:
    """Names of the extra act fields passed to a test's reporter, in order."""
    return list(TEST_SPECS.get(test_name, {}).keys())


__all__ = [
    "FieldSpec",
    "FieldSpecs",
    "SUBTYPE_CHECKS",
    "COMMAND_SPECS",
    "TEST_SPECS",
    "has_kind",
    "has_check",
    "reporter_arg_names",
]
