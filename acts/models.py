"""脚本 / 批次 / 报告数据模型。

作用：统一脚本与批次文档的校验，以及执行报告的结构与序列化。
输入：scripts/<name>.json、batches/<name>.json 的原始 JSON。
输出：Script / Batch（Pydantic）与 Report（dataclass，逐 act 落盘）。
依赖：pydantic
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .catalog import is_url

# 2021-05-01T00:00:00Z，报告时间戳的起点
TIME_STAMP_EPOCH = 1619827200
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class Host(BaseModel):
    which: str = Field(description="主机 URL，替换脚本中所有 url act 的 which")
    what: str = Field(description="主机说明")

    @field_validator("which")
    @classmethod
    def _which_is_url(cls, v: str) -> str:
        if not v or not is_url(v):
            raise ValueError(f"invalid host URL: {v!r}")
        return v

    @field_validator("what")
    @classmethod
    def _what_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("host what must not be empty")
        return v


class Batch(BaseModel):
    what: str
    hosts: List[Host]

    @field_validator("what")
    @classmethod
    def _what_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("batch what must not be empty")
        return v


class Script(BaseModel):
    what: str
    commands: List[Dict[str, Any]]

    @model_validator(mode="after")
    def _check_opening(self) -> "Script":
        if not self.what:
            raise ValueError("script what must not be empty")
        cmds = self.commands
        if not cmds or cmds[0].get("type") != "launch":
            raise ValueError("first command must be launch")
        if len(cmds) < 2 or cmds[1].get("type") != "url":
            raise ValueError("second command must be url")
        which = cmds[1].get("which")
        if not isinstance(which, str) or not is_url(which):
            raise ValueError(f"second command has an invalid URL: {which!r}")
        return self


@dataclass
class Report:
    """一次脚本执行的报告；acts 原地修改，每个 act 之后整体落盘。"""

    script: str
    batch: str
    what: str
    time_stamp: str
    acts: List[Dict[str, Any]]
    test_times: List[List[Any]] = field(default_factory=list)
    exhibits: Optional[str] = None

    def add_test_time(self, name: str, seconds: int) -> None:
        self.test_times.append([name, seconds])
        self.test_times.sort(key=lambda pair: pair[1], reverse=True)

    def add_exhibits(self, markup: str) -> None:
        if self.exhibits:
            self.exhibits += f"\n{markup}"
        else:
            self.exhibits = markup

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "script": self.script,
            "batch": self.batch,
            "what": self.what,
            "timeStamp": self.time_stamp,
            "acts": self.acts,
            "testTimes": self.test_times,
        }
        if self.exhibits is not None:
            d["exhibits"] = self.exhibits
        return d


def _to_base36(n: int) -> str:
    if n <= 0:
        return "0"
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_BASE36[r])
    return "".join(reversed(digits))


def make_time_stamp(now: Optional[float] = None) -> str:
    """以 10 秒为单位、自 2021-05 起算的 base36 时间戳。"""
    t = time.time() if now is None else now
    return _to_base36(int((t - TIME_STAMP_EPOCH) // 10))


__all__ = ["Host", "Batch", "Script", "Report", "make_time_stamp", "TIME_STAMP_EPOCH"]
