"""
L4 Execution — Desktop entry (Linux).

Always rewrites the file; the content is static apart from paths.
"""

from __future__ import annotations

import logging
from pathlib import Path

from opennow_installer.core.models.context import InstallPaths
from opennow_installer.core.services.install.data.templates import (
    DESKTOP_ENTRY,
    render_template,
)

logger = logging.getLogger(__name__)


def write_desktop_entry(paths: InstallPaths, app_name: str = "OpenNOW") -> Path:
    """Write ``opennow.desktop`` pointing at the installed ``opennow`` command."""
    paths.desktop_dir.mkdir(parents=True, exist_ok=True)
    entry = paths.desktop_entry
    entry.write_text(
        render_template(DESKTOP_ENTRY, {"app_name": app_name, "exec_path": paths.command}),
        encoding="utf-8",
    )
    logger.debug("Wrote desktop entry %s", entry)
    return entry
