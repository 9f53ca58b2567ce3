"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from opennow_installer.core.models import (
    InstallContext,
    InstallerSettings,
    InstallPaths,
    OSFamily,
    PackageManager,
    PlatformIdentity,
    PlatformTag,
)


@pytest.fixture
def _scratch(tmp_path_factory) -> Path:
    return tmp_path_factory.mktemp("tmp")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path: Path, _scratch: Path):
    """Keep tests away from the real config, temp dir and log settings."""
    for var in (
        "OPENNOW_INSTALLER_CONFIG",
        "OPENNOW_REPOSITORY",
        "OPENNOW_API_URL",
        "OPENNOW_DOWNLOAD_URL",
        "OPENNOW_LOG_LEVEL",
        "OPENNOW_LOG_FILE",
        "OPENNOW_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    monkeypatch.setattr("tempfile.tempdir", str(_scratch))


@pytest.fixture
def scratch_dir(_scratch: Path) -> Path:
    """The directory scoped working directories are created in."""
    return _scratch


@pytest.fixture
def install_paths(tmp_path: Path) -> InstallPaths:
    return InstallPaths.for_home(
        tmp_path / "home",
        applications_dir=tmp_path / "Applications",
    )


_IDENTITIES = {
    PlatformTag.MACOS_ARM64: PlatformIdentity(
        os=OSFamily.MACOS, arch="arm64", tag=PlatformTag.MACOS_ARM64,
    ),
    PlatformTag.LINUX_X64: PlatformIdentity(
        os=OSFamily.LINUX, arch="x86_64", tag=PlatformTag.LINUX_X64,
    ),
    PlatformTag.LINUX_ARM64: PlatformIdentity(
        os=OSFamily.LINUX, arch="aarch64", tag=PlatformTag.LINUX_ARM64,
    ),
}


@pytest.fixture
def make_context(install_paths: InstallPaths) -> Callable[..., InstallContext]:
    """Build an InstallContext for a platform tag."""

    def _make(
        tag: PlatformTag,
        pm: PackageManager = PackageManager.APT,
        install_dependencies: bool = False,
    ) -> InstallContext:
        return InstallContext(
            platform=_IDENTITIES[tag],
            package_manager=pm,
            install_dependencies=install_dependencies,
            settings=InstallerSettings(),
            paths=install_paths,
        )

    return _make
