"""Resolve a platform label and run ci/run.sh natively or in the platform's container."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from gettextrs_ci.config import load_ci_layout, resolve_ci_layout
from gettextrs_ci.docker import run_in_container
from gettextrs_ci.environment import build_env
from gettextrs_ci.native import run_native
from gettextrs_ci.platforms import resolve_profile

log = logging.getLogger(__name__)


def resolve_and_run(
    label: str,
    ambient_env: Mapping[str, str] | None = None,
    project_root: Path | None = None,
    layout: dict[str, str] | None = None,
    tty: bool = True,
    dry_run: bool = False,
) -> int:
    """Run CI for label. Returns the exit status of ci/run.sh or of the first failing step.

    ambient_env supplies NO_RUN and GETTEXT_* pass-through values (default: os.environ).
    layout defaults to project_root/ci/layout.yaml merged over the built-in defaults.
    Raises UnknownPlatformError for labels outside the profile table.
    """
    profile = resolve_profile(label)
    root = Path(project_root).resolve() if project_root is not None else Path.cwd()
    resolved_layout = load_ci_layout(root) if layout is None else resolve_ci_layout(layout)
    env = build_env(profile, os.environ if ambient_env is None else ambient_env)
    log.debug("Platform %s -> %s", label, env)

    if profile.is_native:
        return run_native(root, env, resolved_layout, dry_run=dry_run)
    return run_in_container(
        root, profile.docker, env, resolved_layout, tty=tty, dry_run=dry_run
    )
