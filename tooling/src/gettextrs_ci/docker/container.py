"""Build the CI image from ci/docker/Dockerfile-{docker} and run ci/run.sh inside it.

The checkout is mounted read-write at the container workdir, target/ on top of it,
the host Rust sysroot read-only and the host cargo registry read-write.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping
from pathlib import Path

from gettextrs_ci.config import resolve_ci_layout
from gettextrs_ci.process import run_command

log = logging.getLogger(__name__)


def ensure_local_dirs(project_root: Path, layout: dict[str, str]) -> list[Path]:
    """Create the cargo cache dir and build output dir under project_root. Returns both paths."""
    dirs = [project_root / layout["cache_dir"], project_root / layout["output_dir"]]
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)
    return dirs


def dockerfile_path(project_root: Path, docker: str, layout: dict[str, str]) -> Path:
    return project_root / layout["docker_dir"] / layout["dockerfile_pattern"].format(docker=docker)


def build_image_cmd(project_root: Path, docker: str, layout: dict[str, str]) -> list[str]:
    return [
        "docker",
        "build",
        "-t",
        layout["image_tag"],
        "-f",
        str(dockerfile_path(project_root, docker, layout)),
        str(project_root / layout["docker_dir"]),
    ]


def toolchain_sysroot() -> Path | None:
    """Host Rust sysroot: TOOLCHAIN_DIR if set, else `rustc --print sysroot`. None if unavailable."""
    override = os.environ.get("TOOLCHAIN_DIR")
    if override:
        return Path(override)
    try:
        r = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True, text=True)
    except OSError:
        return None
    if r.returncode != 0 or not r.stdout.strip():
        return None
    return Path(r.stdout.strip())


def registry_dir() -> Path:
    """Host cargo registry cache: $CARGO_HOME/registry, default ~/.cargo/registry."""
    cargo_home = os.environ.get("CARGO_HOME")
    base = Path(cargo_home) if cargo_home else Path.home() / ".cargo"
    return base / "registry"


def run_container_cmd(
    project_root: Path,
    env: Mapping[str, str],
    layout: dict[str, str],
    toolchain: Path,
    registry: Path,
    tty: bool = True,
) -> list[str]:
    workdir = layout["container_workdir"]
    target_dir = f"{workdir}/target"
    forwarded = {
        **env,
        "CARGO_TARGET_DIR": target_dir,
        "CARGO_HOME": layout["container_cargo_home"],
        "PATH": layout["container_path"],
    }
    cmd = [
        "docker",
        "run",
        "-w",
        workdir,
        "-v",
        f"{project_root}:{workdir}:rw",
        "-v",
        f"{project_root / layout['output_dir']}:{target_dir}:rw",
        "-v",
        f"{toolchain}:{layout['container_toolchain_dir']}:ro",
        "-v",
        f"{registry}:{layout['container_registry_dir']}:rw",
        *[x for k, v in forwarded.items() for x in ("-e", f"{k}={v}")],
        "--interactive",
    ]
    if tty:
        cmd.append("--tty")
    cmd.extend([layout["image_tag"], layout["run_script"]])
    return cmd


def run_in_container(
    project_root: Path,
    docker: str,
    env: Mapping[str, str],
    layout: dict[str, str] | None = None,
    tty: bool = True,
    dry_run: bool = False,
) -> int:
    """Create local dirs, build the image, run ci/run.sh in it. Stops at the first failure and returns its exit status."""
    layout = resolve_ci_layout(layout)
    build_cmd = build_image_cmd(project_root, docker, layout)

    if dry_run:
        toolchain = Path(os.environ.get("TOOLCHAIN_DIR") or "$(rustc --print sysroot)")
        run_cmd = run_container_cmd(project_root, env, layout, toolchain, registry_dir(), tty=tty)
        print(f"[dry-run] would: mkdir -p {layout['cache_dir']} {layout['output_dir']}")
        print(f"[dry-run] would: {' '.join(build_cmd)}")
        print(f"[dry-run] would: {' '.join(run_cmd)}")
        return 0

    toolchain = toolchain_sysroot()
    if toolchain is None:
        print("❌ Could not determine Rust sysroot (is rustc installed?)", file=sys.stderr)
        return 1
    registry = registry_dir()
    log.debug("Toolchain %s, registry %s", toolchain, registry)
    run_cmd = run_container_cmd(project_root, env, layout, toolchain, registry, tty=tty)

    try:
        ensure_local_dirs(project_root, layout)
    except OSError as e:
        print(f"❌ Could not create local directories: {e}", file=sys.stderr)
        return 1

    dockerfile = dockerfile_path(project_root, docker, layout)
    shown = (
        dockerfile.relative_to(project_root)
        if dockerfile.is_relative_to(project_root)
        else dockerfile
    )
    print(f"🐳 Building {layout['image_tag']} from {shown}")
    rc = run_command(build_cmd, cwd=str(project_root))
    if rc != 0:
        print("❌ Docker build failed", file=sys.stderr)
        return rc

    rc = run_command(run_cmd, cwd=str(project_root))
    if rc != 0:
        print(f"❌ {layout['run_script']} failed in container (exit {rc})", file=sys.stderr)
        return rc
    print(f"✅ {layout['run_script']} passed in {layout['image_tag']} ({docker})")
    return 0
