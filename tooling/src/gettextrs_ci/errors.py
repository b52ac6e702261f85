"""Exceptions raised for invalid input. Failing commands are reported via exit codes instead."""

from __future__ import annotations


class CiError(Exception):
    """Base class for gettextrs_ci errors."""


class UnknownPlatformError(CiError):
    def __init__(self, label: str, known: list[str]) -> None:
        self.label = label
        self.known = known
        super().__init__(f"Unknown platform label: {label!r} (known: {', '.join(known)})")


class LayoutError(CiError):
    """ci/layout.yaml could not be read or is not a mapping."""
