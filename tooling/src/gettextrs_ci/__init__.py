"""CI dispatch tooling for gettext-rs: platform profiles, native and containerized ci/run.sh."""

from .dispatch import resolve_and_run
from .errors import CiError, LayoutError, UnknownPlatformError
from .platforms import PLATFORM_PROFILES, PlatformProfile, known_labels, resolve_profile

__all__ = [
    "PLATFORM_PROFILES",
    "CiError",
    "LayoutError",
    "PlatformProfile",
    "UnknownPlatformError",
    "known_labels",
    "resolve_and_run",
    "resolve_profile",
]
