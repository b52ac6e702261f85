"""Run an external command and report its exit status the way a shell would."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Mapping

log = logging.getLogger(__name__)

# Shell exit statuses for a command that cannot be found / cannot be executed.
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


def run_command(cmd: list[str], cwd: str, env: Mapping[str, str] | None = None) -> int:
    """subprocess.run(cmd) and return its exit status. Launch failures map to 127/126 with a message on stderr."""
    log.debug("Running %s in %s", cmd, cwd)
    try:
        r = subprocess.run(cmd, cwd=cwd, env=dict(env) if env is not None else None)
    except FileNotFoundError as e:
        print(f"❌ {cmd[0]}: command not found ({e.strerror})", file=sys.stderr)
        return COMMAND_NOT_FOUND
    except PermissionError as e:
        print(f"❌ {cmd[0]}: cannot execute ({e.strerror})", file=sys.stderr)
        return COMMAND_NOT_EXECUTABLE
    return r.returncode
