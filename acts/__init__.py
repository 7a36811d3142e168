"""acts package initializer.

Command catalog, field schema, validator and the script/batch/report documents
consumed by the runner.
"""

from .validator import is_valid

__all__ = ["is_valid"]
