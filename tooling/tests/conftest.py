"""Pytest fixtures for gettext-rs CI tooling tests."""

from pathlib import Path

import pytest


@pytest.fixture
def tmp_ci_root(tmp_path: Path) -> Path:
    """Checkout-like tree with ci/run.sh and ci/docker/. Returns the project root."""
    ci = tmp_path / "ci"
    (ci / "docker").mkdir(parents=True)
    run_sh = ci / "run.sh"
    run_sh.write_text("#!/bin/sh\nexit 0\n")
    run_sh.chmod(0o755)
    return tmp_path
