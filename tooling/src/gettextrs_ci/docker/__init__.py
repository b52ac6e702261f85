"""Containerized CI: build ci/docker/Dockerfile-{docker} and run ci/run.sh inside it."""

from .container import (
    build_image_cmd,
    dockerfile_path,
    ensure_local_dirs,
    registry_dir,
    run_container_cmd,
    run_in_container,
    toolchain_sysroot,
)

__all__ = [
    "build_image_cmd",
    "dockerfile_path",
    "ensure_local_dirs",
    "registry_dir",
    "run_container_cmd",
    "run_in_container",
    "toolchain_sysroot",
]
