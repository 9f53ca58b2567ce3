"""
L3 Detection — Native package manager probing.

Read-only: only looks for manager binaries on PATH.
"""

from __future__ import annotations

import logging
import shutil
from typing import Callable

from opennow_installer.core.models.platform import OSFamily, PackageManager
from opennow_installer.core.services.install.data.packages import (
    LINUX_MANAGERS,
    MACOS_MANAGER,
)

logger = logging.getLogger(__name__)

Which = Callable[[str], "str | None"]


def resolve_package_manager(
    os_family: OSFamily,
    which: Which = shutil.which,
) -> PackageManager:
    """Find the package manager to install GStreamer with.

    macOS only supports Homebrew. Linux probes apt-get, dnf, pacman,
    zypper in that order and takes the first one present.

    Args:
        os_family: Detected OS family.
        which: PATH lookup (``shutil.which`` signature).

    Returns:
        The chosen manager, or ``PackageManager.UNKNOWN`` if none found.
        The caller decides whether that is fatal.
    """
    candidates = (MACOS_MANAGER,) if os_family is OSFamily.MACOS else LINUX_MANAGERS

    for pm, binary in candidates:
        path = which(binary)
        if path:
            logger.debug("Found %s at %s", binary, path)
            return pm

    logger.debug(
        "No package manager found (probed: %s)",
        ", ".join(binary for _, binary in candidates),
    )
    return PackageManager.UNKNOWN
