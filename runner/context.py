"""
runner.context
单次脚本执行的上下文：报告、检查点路径、浏览器会话与当前页面。

当前页面只属于本次执行（批次中每个主机各有一个上下文），
只有 launch 与 page 两类 act 会替换它。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from acts.models import Report

from .checkpoint import write_json
from .config import RunConfig


@dataclass
class RunContext:
    report: Report
    checkpoint_path: str
    config: RunConfig
    key: str = ""
    # 具有 async launch(type_name) -> page 与 async close() 的会话对象
    session: Any = None
    page: Any = None
    browser_type: Optional[str] = None

    def log(self, msg: str) -> None:
        if self.config.verbose:
            print(f"[run {self.key}] {msg}")

    def checkpoint(self) -> None:
        """将完整报告写入检查点文件（每个 act 之后调用）。"""
        write_json(self.checkpoint_path, self.report.to_dict())

    def page_url(self) -> str:
        return getattr(self.page, "url", "") or ""
