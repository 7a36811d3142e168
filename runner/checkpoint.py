"""
JSON I/O for scripts, batches and report checkpoints (no browser).
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Tuple


def read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, obj: Any) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def report_path(report_dir: str, time_stamp: str, host_index: int = -1) -> str:
    """report-<ts>.json, or report-<ts>-<NNN>.json for host NNN of a batch."""
    suffix = f"-{host_index:03d}" if host_index > -1 else ""
    return os.path.join(report_dir, f"report-{time_stamp}{suffix}.json")


def list_whats(directory: str) -> List[Tuple[str, str]]:
    """[(name, what), ...] for every <name>.json in a directory, sorted by name."""
    out: List[Tuple[str, str]] = []
    if not directory or not os.path.isdir(directory):
        return out
    for file_name in sorted(os.listdir(directory)):
        if not file_name.endswith(".json"):
            continue
        name = file_name[: -len(".json")]
        try:
            what = read_json(os.path.join(directory, file_name)).get("what") or ""
        except (OSError, ValueError, AttributeError):
            what = ""
        out.append((name, str(what)))
    return out


__all__ = ["read_json", "write_json", "report_path", "list_whats"]
