"""
L5 Orchestration — The install pipeline.

Runs every step in order, strictly sequentially:

    detect platform → resolve package manager
        → [install GStreamer] → fetch latest release → build artifact
        → download (scoped temp dir) → platform strategy → desktop entry

Lower layers report absence/failure via return values. This module is
the only place that classifies a condition as fatal (``InstallError``)
or as a warning (recorded on the outcome, run continues).
"""

from __future__ import annotations

import logging
import shutil
import zipfile
from typing import Callable

from opennow_installer.core.models.context import InstallContext
from opennow_installer.core.models.outcome import InstallationOutcome
from opennow_installer.core.models.platform import (
    OSFamily,
    PackageManager,
    PlatformIdentity,
)
from opennow_installer.core.services.install.data.packages import (
    CANONICAL_PACKAGES,
    HOMEBREW_INSTALL_COMMAND,
)
from opennow_installer.core.services.install.detection.media_framework import (
    get_gstreamer_version,
)
from opennow_installer.core.services.install.detection.package_manager import (
    Which,
    resolve_package_manager,
)
from opennow_installer.core.services.install.detection.platform import (
    detect_platform,
    host_arch,
    host_os,
    normalize_os,
)
from opennow_installer.core.services.install.errors import InstallError
from opennow_installer.core.services.install.events import (
    DETAIL,
    INFO,
    SUCCESS,
    WARN,
    Emit,
    null_emit,
)
from opennow_installer.core.services.install.execution.dependencies import (
    install_media_framework,
)
from opennow_installer.core.services.install.execution.desktop import write_desktop_entry
from opennow_installer.core.services.install.execution.download import (
    download_artifact,
    scoped_workdir,
)
from opennow_installer.core.services.install.execution.shell_path import (
    dir_on_path,
    path_remediation,
)
from opennow_installer.core.services.install.execution.strategies import strategy_for
from opennow_installer.core.services.install.resolver.artifact import resolve_artifact
from opennow_installer.core.services.install.resolver.release import fetch_latest_release

logger = logging.getLogger(__name__)

UNKNOWN_PM_WARNING = "Unknown package manager. You may need to install GStreamer manually."


# ── Host detection ───────────────────────────────────────────────


def detect_host(
    os_name: str | None = None,
    arch: str | None = None,
    *,
    which: Which = shutil.which,
    emit: Emit = null_emit,
) -> tuple[PlatformIdentity, PackageManager]:
    """Identify the platform and its package manager.

    Runs before any network access.

    Raises:
        InstallError: Unsupported OS or architecture, or Homebrew
            missing on macOS.
    """
    os_name = host_os() if os_name is None else os_name
    arch = host_arch() if arch is None else arch

    if normalize_os(os_name) is None:
        raise InstallError(f"Unsupported operating system: {os_name}")

    identity = detect_platform(os_name, arch)
    if identity is None:
        raise InstallError(f"Unsupported architecture: {arch}")

    if identity.translated:
        emit(INFO, "Intel Mac detected - will use ARM64 build with Rosetta 2")
    emit(INFO, f"Detected: {identity.os.value} ({identity.arch}) -> {identity.tag.value}")

    pm = resolve_package_manager(identity.os, which=which)
    if pm is PackageManager.UNKNOWN and identity.os is OSFamily.MACOS:
        raise InstallError(
            "Homebrew not found. Please install it first:",
            remediation=HOMEBREW_INSTALL_COMMAND,
        )

    emit(INFO, f"Package manager: {pm.value}")
    return identity, pm


# ── Pipeline ─────────────────────────────────────────────────────


def run_install(context: InstallContext, emit: Emit = null_emit) -> InstallationOutcome:
    """Run the pipeline from dependencies through desktop integration.

    Args:
        context: Platform, package manager, dependency choice, settings
            and install paths, fixed for the whole run.
        emit: Progress callback ``(level, message)``.

    Returns:
        The installation outcome, including every warning raised.

    Raises:
        InstallError: Release lookup failed, download failed, or a
            required filesystem operation failed.
    """
    warnings: list[str] = []

    def warn(message: str) -> None:
        logger.warning(message)
        warnings.append(message)
        emit(WARN, message)

    if context.package_manager is PackageManager.UNKNOWN:
        warn(UNKNOWN_PM_WARNING)

    if context.install_dependencies:
        _install_dependencies(context, warn, emit)
    else:
        logger.info("Skipping GStreamer dependencies (declined)")

    emit(INFO, "Fetching latest release from GitHub...")
    release = fetch_latest_release(context.settings)
    if release is None:
        raise InstallError("Failed to fetch latest release")
    emit(INFO, f"Latest release: {release.tag_name}")

    tag = context.platform.tag
    artifact = resolve_artifact(tag, release, context.settings)
    strategy = strategy_for(tag)

    emit(INFO, f"Downloading {context.settings.app_name} for {tag.value}...")
    with scoped_workdir() as workdir:
        emit(INFO, f"Downloading from: {artifact.download_url}")
        downloaded = download_artifact(artifact, workdir, context.settings)
        if downloaded is None:
            raise InstallError("Download failed")
        emit(SUCCESS, "Download complete")

        try:
            outcome = strategy.install(downloaded, workdir, context, emit)
        except (OSError, zipfile.BadZipFile, ValueError) as e:
            raise InstallError(f"Installation failed: {e}") from e

    outcome.release_tag = release.tag_name
    for message in outcome.warnings:
        warnings.append(message)
        emit(WARN, message)

    if context.platform.is_linux:
        paths = context.paths
        if not dir_on_path(paths.bin_dir):
            files, line = path_remediation()
            warn(f"{paths.display(paths.bin_dir)} is not in your PATH")
            emit(DETAIL, f"Add this to your {files}:")
            emit(DETAIL, f"  {line}")

        emit(INFO, "Creating desktop entry...")
        try:
            entry = write_desktop_entry(paths, context.settings.app_name)
        except OSError as e:
            raise InstallError(f"Installation failed: {e}") from e
        outcome.desktop_entry = str(entry)
        emit(SUCCESS, "Desktop entry created")

    outcome.warnings = warnings
    return outcome


def _install_dependencies(
    context: InstallContext,
    warn: Callable[[str], None],
    emit: Emit,
) -> None:
    pm = context.package_manager
    emit(INFO, "Installing GStreamer dependencies...")

    if pm is PackageManager.UNKNOWN:
        warn("Please install GStreamer manually for your distribution:")
        for pkg in CANONICAL_PACKAGES:
            emit(DETAIL, f"  - {pkg}")
        # A manual install may already be present
        version = get_gstreamer_version()
    else:
        emit(INFO, f"Installing GStreamer via {pm.value}...")
        result = install_media_framework(pm)
        if result.error:
            warn(f"GStreamer package installation failed: {result.error}")
        version = result.version

    if version:
        emit(SUCCESS, f"GStreamer installed: {version}")
    else:
        warn("GStreamer installation could not be verified")
