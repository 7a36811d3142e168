from __future__ import annotations

from typing import Any, Dict, Optional

from .catalog import is_test
from .schema import COMMAND_SPECS, TEST_SPECS, FieldSpec, FieldSpecs, has_check, has_kind


def spec_for(act: Dict[str, Any]) -> Optional[FieldSpecs]:
    """Return the merged field spec of an act, or None if its type/test is unknown."""
    act_type = act.get("type")
    if not isinstance(act_type, str) or act_type not in COMMAND_SPECS:
        return None
    spec = dict(COMMAND_SPECS[act_type])
    if act_type == "test":
        test_name = act.get("which")
        if not isinstance(test_name, str) or not is_test(test_name):
            return None
        spec.update(TEST_SPECS.get(test_name, {}))
    return spec


def _field_ok(value: Any, field: FieldSpec) -> bool:
    if value is None:
        return not field.required
    return has_kind(value, field.kind) and has_check(value, field.check)


def is_valid(act: Any) -> bool:
    """Whether an act satisfies the schema of its type (test-extended for tests)."""
    if not isinstance(act, dict):
        return False
    spec = spec_for(act)
    if spec is None:
        return False
    return all(_field_ok(act.get(name), field) for name, field in spec.items())


__all__ = ["is_valid", "spec_for"]
