"""
L3 Detection — GStreamer runtime verification.

Runs ``gst-inspect-1.0 --version`` and reports the first line.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from opennow_installer.core.services.install.data.packages import VERIFY_BINARY

logger = logging.getLogger(__name__)


def get_gstreamer_version() -> str | None:
    """Return GStreamer's reported version line.

    Returns:
        e.g. ``"gst-inspect-1.0 version 1.22.0"``, or None when the
        diagnostic binary is not on PATH or could not be run.
    """
    binary = shutil.which(VERIFY_BINARY)
    if not binary:
        return None

    try:
        r = subprocess.run(
            [binary, "--version"],
            capture_output=True, text=True, timeout=10,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.warning("Could not run %s: %s", VERIFY_BINARY, exc)
        return None

    lines = r.stdout.strip().splitlines()
    if r.returncode != 0 or not lines:
        logger.debug("%s --version exited %d", VERIFY_BINARY, r.returncode)
        return None
    return lines[0].strip()
