"""
Install context — the one value threaded through every pipeline step.

Built once at the CLI boundary after platform detection and the
dependency prompt. Steps read from it and never modify it.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from opennow_installer.core.models.platform import PackageManager, PlatformIdentity
from opennow_installer.core.models.settings import InstallerSettings

APP_BUNDLE_NAME = "OpenNOW.app"
APPIMAGE_NAME = "OpenNOW.AppImage"
COMMAND_NAME = "opennow"
DESKTOP_FILE_NAME = "opennow.desktop"


class InstallPaths(BaseModel):
    """Fixed install locations, rooted at a home directory."""

    model_config = ConfigDict(frozen=True)

    home: Path
    applications_dir: Path = Path("/Applications")
    bin_dir: Path
    share_dir: Path
    desktop_dir: Path

    @classmethod
    def for_home(
        cls,
        home: Path | None = None,
        applications_dir: Path = Path("/Applications"),
    ) -> InstallPaths:
        """Derive the standard user-local layout from ``home``."""
        home = home or Path.home()
        return cls(
            home=home,
            applications_dir=applications_dir,
            bin_dir=home / ".local" / "bin",
            share_dir=home / ".local" / "share" / COMMAND_NAME,
            desktop_dir=home / ".local" / "share" / "applications",
        )

    @property
    def app_bundle(self) -> Path:
        return self.applications_dir / APP_BUNDLE_NAME

    @property
    def appimage(self) -> Path:
        return self.bin_dir / APPIMAGE_NAME

    @property
    def command(self) -> Path:
        """``opennow`` in the user bin dir: alias symlink or launcher script."""
        return self.bin_dir / COMMAND_NAME

    @property
    def desktop_entry(self) -> Path:
        return self.desktop_dir / DESKTOP_FILE_NAME

    def display(self, path: Path) -> str:
        """Render ``path`` with ``~`` for the home prefix, as users type it."""
        try:
            return "~/" + str(path.relative_to(self.home))
        except ValueError:
            return str(path)


class InstallContext(BaseModel):
    """Everything later steps need, decided once up front."""

    model_config = ConfigDict(frozen=True)

    platform: PlatformIdentity
    package_manager: PackageManager
    install_dependencies: bool = True
    settings: InstallerSettings = Field(default_factory=InstallerSettings)
    paths: InstallPaths = Field(default_factory=InstallPaths.for_home)
