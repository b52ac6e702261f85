"""Environment forwarded to ci/run.sh: ambient knobs overlaid with the profile's variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from gettextrs_ci.platforms import PlatformProfile

PASSTHROUGH_VARS = (
    "NO_RUN",
    "GETTEXT_SYSTEM",
    "GETTEXT_DIR",
    "GETTEXT_LIB_DIR",
    "GETTEXT_BIN_DIR",
    "GETTEXT_INCLUDE_DIR",
)


def collect_ambient(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Pass-through variables present in environ (default: os.environ)."""
    if environ is None:
        environ = os.environ
    return {k: environ[k] for k in PASSTHROUGH_VARS if k in environ}


def build_env(profile: PlatformProfile, ambient: Mapping[str, str] | None = None) -> dict[str, str]:
    """Ambient pass-through values, then profile values on top."""
    env = collect_ambient(ambient) if ambient is not None else {}
    env.update(profile.to_env())
    return env
