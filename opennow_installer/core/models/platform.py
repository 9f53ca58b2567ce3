"""
Platform models — host identity and package manager choice.

A ``PlatformIdentity`` is computed once per run by the platform
detector and never mutated afterwards.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class OSFamily(str, Enum):
    """Operating systems the installer knows how to handle."""

    MACOS = "macos"
    LINUX = "linux"


class PlatformTag(str, Enum):
    """Canonical OS+arch identifier selecting artifact and strategy."""

    MACOS_ARM64 = "macos-arm64"
    LINUX_X64 = "linux-x64"
    LINUX_ARM64 = "linux-arm64"


class PackageManager(str, Enum):
    """Native package managers the dependency installer supports."""

    BREW = "brew"
    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    UNKNOWN = "unknown"


class PlatformIdentity(BaseModel):
    """Detected host platform.

    ``translated`` is set for macOS hosts that are not arm64; they run
    the arm64 build through Rosetta 2.
    """

    model_config = ConfigDict(frozen=True)

    os: OSFamily
    arch: str
    tag: PlatformTag
    translated: bool = False

    @property
    def is_linux(self) -> bool:
        return self.os is OSFamily.LINUX
