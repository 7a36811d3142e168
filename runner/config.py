from __future__ import annotations

"""
runner.config

集中管理脚本执行相关的基础配置（目录、调试开关、超时）。
从环境变量读取，启动时尽力加载 .env。
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]


def _load_dotenv_if_needed() -> None:
    """尽力从 .env 文件加载 AUTOTEST_* 等环境变量。

    - AUTOTEST_ENV_FILE 指定路径优先；
    - 其次是 CWD/.env；
    - 再其次是仓库根目录的 .env。
    不覆盖已经存在于 os.environ 的变量。
    """
    af = os.getenv("AUTOTEST_ENV_FILE", "").strip()
    for path in (af, os.path.join(os.getcwd(), ".env"), str(REPO_ROOT / ".env")):
        if path and os.path.exists(path):
            load_dotenv(path, override=False)


def _env(*names: str, default: str = "") -> str:
    for name in names:
        v = os.getenv(name)
        if v is not None and v.strip():
            return v.strip()
    return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(default: int, *names: str) -> int:
    try:
        return int(_env(*names, default=str(default)))
    except ValueError:
        return default


@dataclass
class RunConfig:
    """执行配置（从环境变量读取，CLI 参数可覆盖）。"""

    script_dir: str = ""
    batch_dir: str = ""
    report_dir: str = ""
    debug: bool = False
    waits: int = 0
    base_dir: str = str(REPO_ROOT)
    nav_timeout_ms: int = 40000
    wait_timeout_ms: int = 20000
    verbose: bool = True
    port: int = 3000

    @property
    def headless(self) -> bool:
        return not self.debug

    @property
    def nav_wait_until(self) -> str:
        # 部分站点的 load 事件会超时，非调试模式只等 DOMContentLoaded
        return "networkidle" if self.debug else "domcontentloaded"

    @classmethod
    def from_env(cls) -> "RunConfig":
        """从环境变量构造配置，给出合理缺省值。"""
        _load_dotenv_if_needed()
        return cls(
            script_dir=_env("AUTOTEST_SCRIPT_DIR", "SCRIPTDIR"),
            batch_dir=_env("AUTOTEST_BATCH_DIR", "BATCHDIR"),
            report_dir=_env("AUTOTEST_REPORT_DIR", "REPORTDIR"),
            debug=_env_bool("AUTOTEST_DEBUG", False),
            waits=max(0, _env_int(0, "AUTOTEST_WAITS")),
            base_dir=_env("AUTOTEST_DIRNAME", default=str(REPO_ROOT)),
            nav_timeout_ms=_env_int(40000, "AUTOTEST_NAV_TIMEOUT_MS"),
            wait_timeout_ms=_env_int(20000, "AUTOTEST_WAIT_TIMEOUT_MS"),
            verbose=_env_bool("AUTOTEST_VERBOSE", True),
            port=_env_int(3000, "AUTOTEST_PORT", "PORT"),
        )


def get_run_config(overrides: Optional[dict] = None) -> RunConfig:
    """便捷函数：读取环境配置并应用非空覆盖项。"""
    cfg = RunConfig.from_env()
    for k, v in (overrides or {}).items():
        if v is not None and hasattr(cfg, k):
            setattr(cfg, k, v)
    return cfg
