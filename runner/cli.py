#!/usr/bin/env python3
"""
Run an autotest script, optionally across every host of a batch.

Usage:
  python -m runner.cli --script <name> [--batch <name>] [--script-dir DIR] [--batch-dir DIR]
                       [--report-dir DIR] [--debug] [--waits MS] [--quiet]

Outputs:
  - One report-<timeStamp>[-NNN].json per run in the report directory
  - Prints the report path(s)
  - Exit code 0 when the run(s) completed, 2 when a script/batch is missing or invalid
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from acts.models import make_time_stamp

from .batch import NO_BATCH, run_job_sync
from .checkpoint import report_path
from .config import get_run_config
from .errors import RunError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run an accessibility test script in Playwright browsers")
    ap.add_argument("--script", required=True, help="Script name (scripts/<name>.json)")
    ap.add_argument("--batch", default=None, help="Optional batch name (batches/<name>.json)")
    ap.add_argument("--script-dir", default=None, help="Directory of script files (default: AUTOTEST_SCRIPT_DIR)")
    ap.add_argument("--batch-dir", default=None, help="Directory of batch files (default: AUTOTEST_BATCH_DIR)")
    ap.add_argument("--report-dir", default=None, help="Directory for reports (default: AUTOTEST_REPORT_DIR)")
    ap.add_argument("--debug", action="store_true", default=None, help="Headed browsers, wait for networkidle")
    ap.add_argument("--waits", type=int, default=None, help="Slow-motion delay per browser operation (ms)")
    ap.add_argument("--quiet", dest="verbose", action="store_false", default=None, help="No progress logs")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = get_run_config(
        {
            "script_dir": args.script_dir,
            "batch_dir": args.batch_dir,
            "report_dir": args.report_dir,
            "debug": args.debug,
            "waits": args.waits,
            "verbose": args.verbose,
        }
    )
    time_stamp = make_time_stamp()
    batch_name = args.batch or NO_BATCH
    if cfg.verbose:
        print(f"[autotest] script={args.script} batch={batch_name} timeStamp={time_stamp}")
    try:
        reports = run_job_sync(cfg, args.script, batch_name, time_stamp=time_stamp)
    except RunError as e:
        print(f"[ERROR] {e}")
        return 2

    if len(reports) == 1 and batch_name == NO_BATCH:
        print(report_path(cfg.report_dir, time_stamp))
    else:
        for index in range(len(reports)):
            print(report_path(cfg.report_dir, time_stamp, index))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
