"""
L4 Execution — Artifact download into a scoped working directory.

The working directory is a ``TemporaryDirectory``: it is removed when
the ``with`` block exits, whether the run succeeded, raised, or was
interrupted (SIGINT, or SIGTERM once the CLI maps it to SystemExit).
"""

from __future__ import annotations

import contextlib
import logging
import shutil
import tempfile
import urllib.error
import urllib.request
from pathlib import Path
from typing import Iterator

from opennow_installer.core.models.release import ArtifactDescriptor
from opennow_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

WORKDIR_PREFIX = "opennow-install-"


@contextlib.contextmanager
def scoped_workdir() -> Iterator[Path]:
    """Yield a fresh temp directory that is always deleted on exit."""
    with tempfile.TemporaryDirectory(prefix=WORKDIR_PREFIX) as tmp:
        logger.debug("Working directory: %s", tmp)
        yield Path(tmp)


def download_artifact(
    artifact: ArtifactDescriptor,
    workdir: Path,
    settings: InstallerSettings,
) -> Path | None:
    """Fetch ``artifact`` into ``workdir``.

    A failed transfer leaves no partial file behind.

    Returns:
        Path of the downloaded file, or None if it is absent afterwards.
    """
    dest = workdir / artifact.filename
    req = urllib.request.Request(
        artifact.download_url,
        headers={"User-Agent": settings.user_agent},
    )
    kwargs = {} if settings.http_timeout is None else {"timeout": settings.http_timeout}

    logger.debug("GET %s → %s", artifact.download_url, dest)
    try:
        with urllib.request.urlopen(req, **kwargs) as resp, open(dest, "wb") as out:
            shutil.copyfileobj(resp, out)
    except (urllib.error.URLError, OSError) as exc:
        logger.warning("Download of %s failed: %s", artifact.download_url, exc)
        dest.unlink(missing_ok=True)

    if not dest.is_file():
        return None
    logger.info("Downloaded %s (%d bytes)", dest.name, dest.stat().st_size)
    return dest
