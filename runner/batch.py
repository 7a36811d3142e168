"""
runner.batch
加载脚本/批次文档并执行：单脚本执行一次，批次则对每个主机并发执行一次。

- 每次执行拥有独立的 RunContext 与 BrowserSession（互不共享页面）；
- 批次主机的 acts 为脚本命令的深拷贝，其中所有 url act 的 which/what
  被替换为该主机的 URL 与说明；
- 所有执行结束（或失败）后关闭各自的浏览器。
"""

from __future__ import annotations

import asyncio
import copy
import os
from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import async_playwright
from pydantic import ValidationError

from acts.models import Batch, Host, Report, Script, make_time_stamp
from browser.session import BrowserSession

from .checkpoint import read_json, report_path
from .config import RunConfig
from .context import RunContext
from .errors import RunError
from .interpreter import do_acts

NO_BATCH = "None"

SessionFactory = Callable[[Callable[[str], None]], Any]


def _load_doc(directory: str, name: str, kind: str) -> Dict[str, Any]:
    upper = kind.upper()
    path = os.path.join(directory or "", f"{name}.json")
    if not name or not os.path.isfile(path):
        raise RunError(f"{upper}_NOT_FOUND", f"load_{kind}", f"{kind} not found: {name}", document=name, path=path)
    try:
        return read_json(path)
    except (OSError, ValueError) as e:
        raise RunError(
            f"{upper}_INVALID", f"load_{kind}", f"{kind} is not readable JSON: {e}",
            document=name, path=path, original=e,
        )


def load_script(script_dir: str, name: str) -> Script:
    doc = _load_doc(script_dir, name, "script")
    try:
        return Script.model_validate(doc)
    except ValidationError as e:
        raise RunError("SCRIPT_INVALID", "load_script", f"invalid script {name}: {e}", document=name, original=e)


def load_batch(batch_dir: str, name: str) -> Batch:
    doc = _load_doc(batch_dir, name, "batch")
    try:
        return Batch.model_validate(doc)
    except ValidationError as e:
        raise RunError("BATCH_INVALID", "load_batch", f"invalid batch {name}: {e}", document=name, original=e)


def host_acts(commands: List[Dict[str, Any]], host: Host) -> List[Dict[str, Any]]:
    """脚本命令的深拷贝，url act 指向该主机。"""
    acts = copy.deepcopy(commands)
    for act in acts:
        if isinstance(act, dict) and act.get("type") == "url":
            act["which"] = host.which
            act["what"] = host.what
    return acts


async def run_acts(
    config: RunConfig,
    *,
    script_name: str,
    batch_name: str,
    what: str,
    acts: List[Dict[str, Any]],
    time_stamp: str,
    make_session: SessionFactory,
    host_index: int = -1,
) -> Report:
    """执行一份 acts 列表，报告逐 act 写入检查点文件。"""
    report = Report(script=script_name, batch=batch_name, what=what, time_stamp=time_stamp, acts=acts)
    key = time_stamp if host_index < 0 else f"{time_stamp}-{host_index:03d}"
    ctx = RunContext(
        report=report,
        checkpoint_path=report_path(config.report_dir, time_stamp, host_index),
        config=config,
        key=key,
    )
    ctx.session = make_session(ctx.log)
    ctx.log(f"start script={script_name} batch={batch_name} acts={len(acts)}")
    try:
        await do_acts(ctx)
    finally:
        await ctx.session.close()
    ctx.log(f"done -> {ctx.checkpoint_path}")
    return report


async def run_loaded(
    config: RunConfig,
    script_name: str,
    script: Script,
    batch_name: str,
    batch: Optional[Batch],
    time_stamp: str,
    make_session: SessionFactory,
) -> List[Report]:
    if batch is None:
        report = await run_acts(
            config,
            script_name=script_name,
            batch_name=batch_name,
            what=script.what,
            acts=copy.deepcopy(script.commands),
            time_stamp=time_stamp,
            make_session=make_session,
        )
        return [report]

    tasks = [
        run_acts(
            config,
            script_name=script_name,
            batch_name=batch_name,
            what=script.what,
            acts=host_acts(script.commands, host),
            time_stamp=time_stamp,
            make_session=make_session,
            host_index=index,
        )
        for index, host in enumerate(batch.hosts)
    ]
    # 等待全部主机结束后再抛出第一个意外异常
    results = await asyncio.gather(*tasks, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def run_job(
    config: RunConfig,
    script_name: str,
    batch_name: Optional[str] = None,
    *,
    time_stamp: Optional[str] = None,
) -> List[Report]:
    """加载并执行脚本（可选批次），返回全部报告。文档错误抛出 RunError。"""
    script = load_script(config.script_dir, script_name)
    batch: Optional[Batch] = None
    if batch_name and batch_name != NO_BATCH:
        batch = load_batch(config.batch_dir, batch_name)
    ts = time_stamp or make_time_stamp()

    async with async_playwright() as pw:

        def make_session(log: Callable[[str], None]) -> BrowserSession:
            return BrowserSession(pw, headless=config.headless, slow_mo=config.waits, log=log)

        return await run_loaded(config, script_name, script, batch_name or NO_BATCH, batch, ts, make_session)


def run_job_sync(
    config: RunConfig,
    script_name: str,
    batch_name: Optional[str] = None,
    *,
    time_stamp: Optional[str] = None,
) -> List[Report]:
    return asyncio.run(run_job(config, script_name, batch_name, time_stamp=time_stamp))


__all__ = [
    "NO_BATCH",
    "load_script",
    "load_batch",
    "host_acts",
    "run_acts",
    "run_loaded",
    "run_job",
    "run_job_sync",
]
