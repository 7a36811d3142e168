from __future__ import annotations

"""
Flask 执行服务：列出可用脚本 / 批次 / 检查，并按请求执行脚本。

用途：
  - GET  /api/catalog：返回脚本、批次（含 "None" 选项）与检查说明；
  - POST /api/run：执行一个脚本（可选批次），运行结束后返回全部报告。

注意：
  - 一次请求同步执行到结束，报告同时逐 act 写入 report_dir；
  - 目录与超时等配置来自 runner.config（环境变量 / .env）。
"""

import argparse
import asyncio
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from acts.catalog import TESTS
from acts.models import Report, make_time_stamp
from runner.batch import NO_BATCH, run_job
from runner.checkpoint import list_whats
from runner.config import RunConfig, get_run_config
from runner.errors import RunError

NO_BATCH_WHAT = "Perform the script without a batch"

app = Flask(__name__)

# 首次请求时从环境读取；测试或 main() 可直接替换
CONFIG: Optional[RunConfig] = None


def _config() -> RunConfig:
    global CONFIG
    if CONFIG is None:
        CONFIG = get_run_config()
    return CONFIG


def catalog_impl(cfg: RunConfig) -> Dict[str, Any]:
    batches: List[List[str]] = [[NO_BATCH, NO_BATCH_WHAT]]
    batches.extend([name, what] for name, what in list_whats(cfg.batch_dir))
    return {
        "ok": True,
        "scripts": [[name, what] for name, what in list_whats(cfg.script_dir)],
        "batches": batches,
        "tests": dict(TESTS),
    }


def _run_in_new_loop(cfg: RunConfig, script_name: str, batch_name: str, time_stamp: str) -> List[Report]:
    # Flask 的请求线程里没有事件循环，每个请求单独建一个
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        return loop.run_until_complete(run_job(cfg, script_name, batch_name, time_stamp=time_stamp))
    finally:
        try:
            loop.close()
        finally:
            asyncio.set_event_loop(None)


def run_impl(cfg: RunConfig, payload: Dict[str, Any]) -> Tuple[Dict[str, Any], int]:
    """执行请求中的脚本，返回结果字典与 HTTP 状态码。

    请求 JSON：
      {"scriptName": "tp10", "batchName": "weborgs"}   # batchName 可省略或为 "None"

    返回 JSON（成功时）：
      {"ok": true, "timeStamp": "...", "reports": [{script, batch, what, timeStamp, acts, testTimes, ...}]}
    """
    script_name = str(payload.get("scriptName") or "").strip()
    batch_name = str(payload.get("batchName") or NO_BATCH).strip() or NO_BATCH
    if not script_name:
        return {"ok": False, "error": "empty_script_name"}, 400

    time_stamp = make_time_stamp()
    if cfg.verbose:
        print(f"[front.app] run script={script_name} batch={batch_name} timeStamp={time_stamp}")
    try:
        reports = _run_in_new_loop(cfg, script_name, batch_name, time_stamp)
    except RunError as e:
        return {"ok": False, "error": str(e), "code": e.code}, 400
    return {"ok": True, "timeStamp": time_stamp, "reports": [r.to_dict() for r in reports]}, 200


@app.get("/api/catalog")
def catalog():
    return jsonify(catalog_impl(_config()))


@app.post("/api/run")
def run():
    """HTTP 封装：读取 JSON 请求体，调用 run_impl，返回 JSON 响应。"""
    payload = request.get_json(silent=True) or {}
    result, status = run_impl(_config(), payload)
    return jsonify(result), status


def main(argv: Optional[List[str]] = None) -> None:
    """启动 Flask 执行服务。"""
    global CONFIG

    parser = argparse.ArgumentParser(description="autotest 执行服务")
    parser.add_argument("--port", type=int, default=None, help="Flask 监听端口（默认 AUTOTEST_PORT 或 3000）")
    parser.add_argument("--debug", action="store_true", default=None, help="有头浏览器 + networkidle")
    args = parser.parse_args(argv)
    CONFIG = get_run_config({"port": args.port, "debug": args.debug})
    print(f"[front.app] script_dir={CONFIG.script_dir} batch_dir={CONFIG.batch_dir} report_dir={CONFIG.report_dir}")
    app.run(host="127.0.0.1", port=int(CONFIG.port))


if __name__ == "__main__":  # pragma: no cover
    main()
