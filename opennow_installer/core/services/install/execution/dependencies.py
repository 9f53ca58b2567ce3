"""
L4 Execution — GStreamer dependency installation.

Runs the resolved package manager's install commands, then verifies
the runtime with ``gst-inspect-1.0``. Single attempt, no retries.
"""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass, field

from opennow_installer.core.models.platform import PackageManager
from opennow_installer.core.services.install.data.packages import (
    install_commands,
    needs_sudo,
)
from opennow_installer.core.services.install.detection.media_framework import (
    get_gstreamer_version,
)
from opennow_installer.core.services.install.execution.subprocess_runner import (
    run_command,
)

logger = logging.getLogger(__name__)


@dataclass
class DependencyResult:
    """What happened when installing GStreamer."""

    attempted: bool = False
    ok: bool = False
    commands: list[str] = field(default_factory=list)  # shell-quoted, as run
    error: str | None = None
    version: str | None = None  # gst-inspect-1.0 first line, if verified


def install_media_framework(pm: PackageManager) -> DependencyResult:
    """Install the GStreamer runtime packages with ``pm``.

    For ``PackageManager.UNKNOWN`` nothing is run; the result has
    ``attempted=False`` and the caller prints the manual package list.
    Verification runs whenever an install was attempted.
    """
    result = DependencyResult()
    commands = install_commands(pm)
    if not commands:
        return result

    result.attempted = True
    sudo = needs_sudo(pm)
    for cmd in commands:
        result.commands.append(shlex.join(cmd))
        logger.info("Installing GStreamer via %s: %s", pm.value, shlex.join(cmd))
        outcome = run_command(cmd, needs_sudo=sudo, stream=True)
        if not outcome["ok"]:
            result.error = f"{shlex.join(cmd)}: {outcome['error']}"
            logger.warning("GStreamer install step failed: %s", result.error)
            break
    else:
        result.ok = True

    result.version = get_gstreamer_version()
    return result
