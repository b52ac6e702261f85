"""Platform profiles: label -> target triple, docker image, gettext location overrides.

Profiles without a docker image run ci/run.sh natively on the host (the macOS jobs).
"""

from __future__ import annotations

from dataclasses import dataclass

from gettextrs_ci.errors import UnknownPlatformError

HOMEBREW_GETTEXT = "/usr/local/opt/gettext"
BUILD_RESULT_DIR = "/result"


@dataclass(frozen=True)
class PlatformProfile:
    label: str
    target: str
    docker: str | None = None
    gettext_system: bool = False
    gettext_dir: str | None = None
    gettext_lib_dir: str | None = None
    gettext_bin_dir: str | None = None
    gettext_include_dir: str | None = None

    @property
    def is_native(self) -> bool:
        return self.docker is None

    def to_env(self) -> dict[str, str]:
        """Variables this profile sets, as passed to ci/run.sh. Unset fields are omitted."""
        env = {"TARGET": self.target}
        if self.docker is not None:
            env["DOCKER"] = self.docker
        if self.gettext_system:
            env["GETTEXT_SYSTEM"] = "1"
        for name, value in (
            ("GETTEXT_DIR", self.gettext_dir),
            ("GETTEXT_LIB_DIR", self.gettext_lib_dir),
            ("GETTEXT_BIN_DIR", self.gettext_bin_dir),
            ("GETTEXT_INCLUDE_DIR", self.gettext_include_dir),
        ):
            if value is not None:
                env[name] = value
        return env


def _split_dirs(root: str) -> dict[str, str]:
    return {
        "gettext_lib_dir": f"{root}/lib",
        "gettext_bin_dir": f"{root}/bin",
        "gettext_include_dir": f"{root}/include",
    }


_PROFILES = [
    PlatformProfile(
        "linux64-system", "x86_64-unknown-linux-gnu", "linux64-gettext", gettext_system=True
    ),
    PlatformProfile("linux64", "x86_64-unknown-linux-gnu", "linux64"),
    PlatformProfile("linux32-system", "i686-unknown-linux-gnu", "linux32-gettext"),
    PlatformProfile("linux32", "i686-unknown-linux-gnu", "linux32"),
    PlatformProfile("musl", "x86_64-unknown-linux-musl", "musl"),
    PlatformProfile(
        "build", "x86_64-unknown-linux-gnu", "linux64-build", gettext_dir=BUILD_RESULT_DIR
    ),
    PlatformProfile(
        "build2", "x86_64-unknown-linux-gnu", "linux64-build", **_split_dirs(BUILD_RESULT_DIR)
    ),
    PlatformProfile("macos-homebrew", "x86_64-apple-darwin", gettext_dir=HOMEBREW_GETTEXT),
    PlatformProfile("macos-homebrew2", "x86_64-apple-darwin", **_split_dirs(HOMEBREW_GETTEXT)),
    PlatformProfile("macos", "x86_64-apple-darwin"),
]

PLATFORM_PROFILES: dict[str, PlatformProfile] = {p.label: p for p in _PROFILES}


def known_labels() -> list[str]:
    return list(PLATFORM_PROFILES)


def resolve_profile(label: str) -> PlatformProfile:
    """Return the profile for label. Raises UnknownPlatformError for any other string."""
    try:
        return PLATFORM_PROFILES[label]
    except KeyError:
        raise UnknownPlatformError(label, known_labels()) from None
