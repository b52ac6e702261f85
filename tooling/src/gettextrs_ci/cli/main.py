"""Main CLI entry point for gettext-rs CI tooling."""

import logging
import os
import sys

from gettextrs_ci.cli import platforms_cmd, run_cmd

LOG_LEVEL_ENV = "GETTEXTRS_CI_LOG_LEVEL"


def log_level_from_env() -> int:
    """Level named by GETTEXTRS_CI_LOG_LEVEL; WARNING when unset or not a level name."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    """Main CLI entry point."""
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if len(sys.argv) < 2:
        print("Usage: gettextrs-ci <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  run <label>          - Run ci/run.sh for a platform (natively or in docker)",
            file=sys.stderr,
        )
        print(
            "  platforms [--label L] - List platform profiles, or show one label's variables",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "run":
        run_cmd.run_run_argv()
    elif command == "platforms":
        platforms_cmd.run_platforms_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
