"""
L3 Detection — Host platform identification.

Maps raw OS/arch strings to a canonical ``PlatformTag``. Pure apart
from the defaults read from ``platform`` when no strings are given.
"""

from __future__ import annotations

import logging
import platform

from opennow_installer.core.models.platform import (
    OSFamily,
    PlatformIdentity,
    PlatformTag,
)

logger = logging.getLogger(__name__)

# (os, machine) → tag.  macOS is handled separately: every arch gets arm64.
_LINUX_ARCH_TAGS: dict[str, PlatformTag] = {
    "x86_64": PlatformTag.LINUX_X64,
    "aarch64": PlatformTag.LINUX_ARM64,
}


def host_os() -> str:
    """OS identifier as reported by the running interpreter (``Darwin``, ``Linux``)."""
    return platform.system()


def host_arch() -> str:
    """Machine architecture as reported by the kernel (``arm64``, ``x86_64``)."""
    return platform.machine()


def normalize_os(os_name: str) -> OSFamily | None:
    """Classify an OS identifier.

    Accepts both ``platform.system()`` values (``Darwin``, ``Linux``)
    and shell ``$OSTYPE`` values (``darwin23``, ``linux-gnu``).

    Returns:
        The OS family, or None if the OS is not supported.
    """
    name = os_name.strip().lower()
    if name.startswith("darwin") or name == "macos":
        return OSFamily.MACOS
    if name.startswith("linux"):
        return OSFamily.LINUX
    return None


def detect_platform(
    os_name: str | None = None,
    arch: str | None = None,
) -> PlatformIdentity | None:
    """Compute the platform identity for an (os, arch) pair.

    Intel Macs get the arm64 build; Rosetta 2 translates it.

    Args:
        os_name: OS identifier (default: the running host).
        arch: Machine architecture (default: the running host).

    Returns:
        PlatformIdentity, or None for any unsupported combination.
    """
    os_name = host_os() if os_name is None else os_name
    arch = host_arch() if arch is None else arch
    machine = arch.strip().lower()

    family = normalize_os(os_name)
    if family is None:
        logger.debug("Unsupported OS %r", os_name)
        return None

    if family is OSFamily.MACOS:
        return PlatformIdentity(
            os=family,
            arch=machine,
            tag=PlatformTag.MACOS_ARM64,
            translated=machine != "arm64",
        )

    tag = _LINUX_ARCH_TAGS.get(machine)
    if tag is None:
        logger.debug("Unsupported Linux architecture %r", arch)
        return None
    return PlatformIdentity(os=family, arch=machine, tag=tag)
