"""
L4 Execution — Zip extraction that keeps unix metadata.

``zipfile.extractall`` drops permission bits and turns symlinks into
regular files, which breaks .app bundles and the arm64 bundle's
executables. Mode and link type live in the high 16 bits of
``external_attr`` for archives created on unix.
"""

from __future__ import annotations

import logging
import os
import stat
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)


def extract_zip(archive: Path, dest: Path) -> list[str]:
    """Extract ``archive`` into ``dest``.

    Returns:
        Top-level entry names that were extracted.

    Raises:
        zipfile.BadZipFile: If the archive is corrupt.
        ValueError: If a member would land outside ``dest``.
    """
    dest = dest.resolve()
    top_level: set[str] = set()

    with zipfile.ZipFile(archive) as zf:
        for info in zf.infolist():
            target = dest / info.filename
            parent = target.parent.resolve()
            if parent != dest and dest not in parent.parents:
                raise ValueError(f"Refusing to extract outside {dest}: {info.filename}")

            top_level.add(info.filename.split("/", 1)[0])
            mode = info.external_attr >> 16

            if stat.S_ISLNK(mode):
                target.parent.mkdir(parents=True, exist_ok=True)
                if target.is_symlink() or target.exists():
                    target.unlink()
                os.symlink(zf.read(info).decode("utf-8"), target)
                continue

            zf.extract(info, dest)
            if mode and not info.is_dir():
                os.chmod(target, stat.S_IMODE(mode))

    logger.debug("Extracted %s: %s", archive.name, sorted(top_level))
    return sorted(top_level)
