"""runner package initializer.

Act interpreter, per-run context, checkpointing and script/batch orchestration.
Run a script with `python -m runner.cli`.
"""
