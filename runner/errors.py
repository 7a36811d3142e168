"""
runner.errors
文档级错误类型定义。

单个 act 的失败只记录为 act.result 中的诊断字符串，不抛异常；
RunError 仅用于脚本/批次文档缺失或非法等无法开始执行的情况。
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RunError(Exception):
    """无法开始执行的错误。

    code: 错误码（SCRIPT_NOT_FOUND/SCRIPT_INVALID/BATCH_NOT_FOUND/BATCH_INVALID 等）
    stage: 出错阶段（load_script/load_batch/...）
    message: 人类可读的错误信息
    document: 可选，出错的脚本或批次名称
    path: 可选，相关文件路径
    original: 可选，原始异常对象
    """

    code: str
    stage: str
    message: str
    document: Optional[str] = None
    path: Optional[str] = None
    original: Optional[Exception] = None

    def __str__(self) -> str:
        base = f"[{self.code}@{self.stage}] {self.message}"
        if self.document:
            base += f" (document={self.document})"
        if self.path:
            base += f" (path={self.path})"
        return base
