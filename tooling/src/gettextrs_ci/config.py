"""CI layout: paths on the host and inside the container.

All host paths are relative to project_root. Override any key in ci/layout.yaml, e.g.:

    image_tag: my-gettext-ci
    container_workdir: /src/gettext-rs
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from gettextrs_ci.errors import LayoutError

log = logging.getLogger(__name__)

LAYOUT_FILE = "ci/layout.yaml"

DEFAULT_CI_LAYOUT: dict[str, str] = {
    "run_script": "ci/run.sh",
    "docker_dir": "ci/docker",
    "dockerfile_pattern": "Dockerfile-{docker}",
    "image_tag": "gettext-rs",
    "cache_dir": ".cargo",
    "output_dir": "target",
    "container_workdir": "/checkout",
    "container_toolchain_dir": "/rust",
    "container_registry_dir": "/cargo/registry",
    "container_cargo_home": "/cargo",
    "container_path": "/rust/bin:/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin",
}


def resolve_ci_layout(layout: dict[str, Any] | None) -> dict[str, str]:
    """Return layout dict with defaults filled. Unknown keys and null values are dropped."""
    if layout is None:
        return dict(DEFAULT_CI_LAYOUT)
    out = dict(DEFAULT_CI_LAYOUT)
    out.update({k: str(v) for k, v in layout.items() if k in out and v is not None})
    return out


def load_ci_layout(project_root: Path) -> dict[str, str]:
    """Resolve layout from project_root/ci/layout.yaml when present, else defaults."""
    path = project_root / LAYOUT_FILE
    if not path.exists():
        return resolve_ci_layout(None)
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Could not read {path}: {e}"
        raise LayoutError(msg) from e
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise LayoutError(msg)
    log.debug("Loaded CI layout overrides from %s: %s", path, sorted(data))
    return resolve_ci_layout(data)
