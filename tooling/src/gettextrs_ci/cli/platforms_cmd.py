"""`gettextrs-ci platforms` — show the platform profile table."""

import argparse
import sys

from gettextrs_ci.errors import UnknownPlatformError
from gettextrs_ci.platforms import PLATFORM_PROFILES, PlatformProfile, resolve_profile


def _overrides(profile: PlatformProfile) -> str:
    env = profile.to_env()
    parts = [f"{k}={v}" for k, v in env.items() if k.startswith("GETTEXT_")]
    return " ".join(parts) if parts else "-"


def format_table() -> str:
    rows = [("LABEL", "TARGET", "IMAGE", "OVERRIDES")]
    for p in PLATFORM_PROFILES.values():
        rows.append((p.label, p.target, p.docker or "native", _overrides(p)))
    widths = [max(len(r[i]) for r in rows) for i in range(3)]
    return "\n".join(
        "  ".join(cell.ljust(w) for cell, w in zip(r[:3], widths)) + "  " + r[3] for r in rows
    )


def run_platforms_argv(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(prog="gettextrs-ci platforms", description="List platform profiles")
    ap.add_argument("--label", default=None, help="Print NAME=value lines for one label")
    args = ap.parse_args(argv)
    if args.label is None:
        print(format_table())
        sys.exit(0)
    try:
        profile = resolve_profile(args.label)
    except UnknownPlatformError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)
    for k, v in profile.to_env().items():
        print(f"{k}={v}")
    sys.exit(0)
