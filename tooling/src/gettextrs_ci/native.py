"""Run ci/run.sh directly on the host."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from gettextrs_ci.config import resolve_ci_layout
from gettextrs_ci.process import COMMAND_NOT_FOUND, run_command

log = logging.getLogger(__name__)


def native_cmd(layout: dict[str, str]) -> list[str]:
    return [layout["run_script"]]


def run_native(
    project_root: Path,
    env: Mapping[str, str],
    layout: dict[str, str] | None = None,
    dry_run: bool = False,
) -> int:
    """Run the CI script in project_root with env on top of the host environment. Returns its exit status."""
    layout = resolve_ci_layout(layout)
    if dry_run:
        words = [f"{k}={v}" for k, v in env.items()] + native_cmd(layout)
        print(f"[dry-run] would: {' '.join(words)}")
        return 0
    script = project_root / layout["run_script"]
    if not script.exists():
        print(f"❌ {script} not found", file=sys.stderr)
        return COMMAND_NOT_FOUND
    log.debug("Running natively with env %s", env)
    # Absolute path: a run_script without a slash must not be looked up on PATH.
    return run_command(
        [str(script.resolve())], cwd=str(project_root), env={**os.environ, **env}
    )
