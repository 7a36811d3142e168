"""scorers: 可插拔的评分模块。

每个模块暴露 `scorer(acts) -> {"total": number, ...}`（同步）。
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, Dict, List

MODULES: Dict[str, str] = {
    "basic": "scorers.basic",
}


def get_scorer(name: str) -> Callable[[List[Dict[str, Any]]], Dict[str, Any]]:
    """按名称加载评分模块并返回其 scorer；未知名称抛 KeyError。"""
    if name not in MODULES:
        raise KeyError(f"no scorer named {name!r}")
    module = importlib.import_module(MODULES[name])
    return getattr(module, "scorer")


__all__ = ["MODULES", "get_scorer"]
