"""checks: 可插拔的测试模块。

每个模块暴露 `async def reporter(page, *extra) -> {"result": dict, "exhibits"?: str}`，
extra 参数按 acts.schema.TEST_SPECS 中声明的字段顺序传入。
"""

from __future__ import annotations

import importlib
from typing import Awaitable, Callable, Dict

MODULES: Dict[str, str] = {
    "autocom": "checks.autocom",
    "bodyText": "checks.body_text",
    "bulk": "checks.bulk",
    "focInd": "checks.foc_ind",
    "focOp": "checks.foc_op",
    "imgAlt": "checks.img_alt",
    "imgBg": "checks.img_bg",
    "inLab": "checks.in_lab",
    "linkUl": "checks.link_ul",
    "radioSet": "checks.radio_set",
    "roleList": "checks.role_list",
    "simple": "checks.simple",
}


def get_reporter(name: str) -> Callable[..., Awaitable[dict]]:
    """按测试名加载模块并返回其 reporter；未知名称抛 KeyError。"""
    if name not in MODULES:
        raise KeyError(f"no test module named {name!r}")
    module = importlib.import_module(MODULES[name])
    return getattr(module, "reporter")


__all__ = ["MODULES", "get_reporter"]
