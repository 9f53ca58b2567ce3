"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called for install
operations (package managers, xattr). Never raises: every outcome is
returned as a result dict.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import time
from typing import Any

logger = logging.getLogger(__name__)


def run_command(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    stream: bool = False,
    timeout: float | None = None,
) -> dict[str, Any]:
    """Run a command, optionally elevated.

    With ``needs_sudo`` the command is prefixed with ``sudo`` unless the
    process already runs as root; sudo prompts on the terminal itself.
    With ``stream`` the child inherits stdout/stderr so the user sees
    package manager progress live.

    Args:
        cmd: Command list for ``subprocess.run()``.
        needs_sudo: Whether the command requires root.
        stream: Pass output through instead of capturing it.
        timeout: Seconds before ``TimeoutExpired``; None waits forever.

    Returns:
        ``{"ok": True, "stdout": "...", "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    if needs_sudo and os.geteuid() != 0:
        cmd = ["sudo"] + cmd

    logger.debug("Running: %s", shlex.join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            capture_output=not stream,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)"}
    except OSError as e:
        logger.debug("Could not start %s: %s", cmd[0], e)
        return {"ok": False, "error": f"Could not run {cmd[0]}: {e}"}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout[-2000:] if result.stdout else ""

    if result.returncode == 0:
        return {"ok": True, "stdout": stdout, "elapsed_ms": elapsed_ms}

    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "stderr": result.stderr[-2000:] if result.stderr else "",
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }
