"""
scorers.basic

Deficit score over the completed test acts of a run. Each check contributes a
non-negative deficit; a check whose result is unusable (an error string, or a
missing field) gets a fixed penalty instead. `total` sums the contributions.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional


def _totals(act: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    result = act.get("result")
    if isinstance(result, dict) and isinstance(result.get("totals"), dict):
        return result["totals"]
    return None


def _bulk(act: Dict[str, Any]) -> int:
    result = act.get("result")
    if isinstance(result, dict) and isinstance(result.get("visibleElements"), (int, float)):
        # square root of the excess of the element count over 150
        return int(math.floor(math.sqrt(max(0, result["visibleElements"] - 150))))
    return 100


def _radio_set(act: Dict[str, Any]) -> int:
    facts = _totals(act)
    if facts is None:
        return 100
    return 2 * (facts["total"] - facts["inSet"])


def _link_ul(act: Dict[str, Any]) -> int:
    facts = _totals(act)
    inline = facts.get("inline") if facts else None
    if not isinstance(inline, dict):
        return 150
    return 3 * (inline["total"] - inline["underlined"])


def _foc_ind(act: Dict[str, Any]) -> int:
    facts = _totals(act)
    missing = ((facts or {}).get("types") or {}).get("indicatorMissing")
    if not isinstance(missing, dict):
        return 150
    return 5 * missing["total"]


def _foc_op(act: Dict[str, Any]) -> int:
    facts = _totals(act)
    if facts is None:
        return 150
    return 4 * facts["operableNotFocusable"]["total"] + facts["focusableNotOperable"]["total"]


RULES = {
    "bulk": _bulk,
    "radioSet": _radio_set,
    "linkUl": _link_ul,
    "focInd": _foc_ind,
    "focOp": _foc_op,
}

FOC_OP_PENALTY = 150


def scorer(acts: List[Dict[str, Any]]) -> Dict[str, Any]:
    deficit: Dict[str, Any] = {"total": 0}
    deficit.update({name: None for name in RULES})
    if not isinstance(acts, list):
        return deficit
    for act in acts:
        if not isinstance(act, dict) or act.get("type") != "test":
            continue
        rule = RULES.get(act.get("which"))
        if rule is None:
            continue
        value = rule(act)
        deficit[act["which"]] = value
        deficit["total"] += value
    # focOp not performed: assign a penalty deficit
    if deficit["focOp"] is None:
        deficit["focOp"] = FOC_OP_PENALTY
        deficit["total"] += FOC_OP_PENALTY
    return deficit
