"""`gettextrs-ci run <label>` — run ci/run.sh for one platform."""

import argparse
import sys
from pathlib import Path

from gettextrs_ci.dispatch import resolve_and_run
from gettextrs_ci.errors import CiError, UnknownPlatformError
from gettextrs_ci.platforms import known_labels

# argparse uses 2 for usage errors; an unknown label is one.
EXIT_USAGE = 2


def run_run_argv(argv: list[str] | None = None) -> None:
    """Parse argv (default: sys.argv[2:]) and exit with the CI run's exit status."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(
        prog="gettextrs-ci run",
        description="Run ci/run.sh natively or in the platform's docker image",
    )
    ap.add_argument("label", help=f"platform label: {', '.join(known_labels())}")
    ap.add_argument(
        "--project-root",
        type=lambda s: Path(s).resolve(),
        default=Path.cwd(),
        help="Checkout to build (default: cwd)",
    )
    ap.add_argument("--dry-run", action="store_true", help="Print commands without running them")
    ap.add_argument(
        "--no-tty", action="store_true", help="Do not allocate a TTY for the container"
    )
    args = ap.parse_args(argv)
    try:
        rc = resolve_and_run(
            args.label,
            project_root=args.project_root,
            tty=not args.no_tty,
            dry_run=args.dry_run,
        )
    except UnknownPlatformError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)
    except CiError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc)
