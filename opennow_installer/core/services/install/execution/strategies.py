"""
L4 Execution — Per-platform install strategies.

One strategy per ``PlatformTag``, all behind the same ``install``
capability. ``STRATEGIES`` is checked against the enum at import time,
so adding a tag without a strategy fails immediately.

Every strategy converges on the same final filesystem state no matter
what a previous run left behind: existing targets are removed, then
recreated. Filesystem errors propagate; the orchestrator treats them
as fatal.
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from opennow_installer.core.models.context import APP_BUNDLE_NAME, COMMAND_NAME, InstallContext
from opennow_installer.core.models.outcome import InstallationOutcome
from opennow_installer.core.models.platform import PlatformTag
from opennow_installer.core.services.install.data.templates import (
    ENTRY_POINT,
    LAUNCHER_SCRIPT,
    render_template,
)
from opennow_installer.core.services.install.events import DETAIL, INFO, SUCCESS, Emit
from opennow_installer.core.services.install.execution.archive import extract_zip
from opennow_installer.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)

BUNDLE_DIR_NAME = "bundle"
QUARANTINE_ATTR = "com.apple.quarantine"


def _remove(path: Path) -> None:
    """Delete a file, symlink or directory tree if present."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


class InstallStrategy(ABC):
    """Installs a downloaded artifact for one platform tag."""

    @property
    @abstractmethod
    def tag(self) -> PlatformTag:
        """The platform tag this strategy handles."""

    @abstractmethod
    def install(
        self,
        artifact: Path,
        workdir: Path,
        context: InstallContext,
        emit: Emit,
    ) -> InstallationOutcome:
        """Install ``artifact`` (already inside ``workdir``).

        Raises:
            OSError: Any required file operation failed.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} tag={self.tag.value!r}>"


class MacArm64Strategy(InstallStrategy):
    """Unzip the .app bundle into /Applications."""

    @property
    def tag(self) -> PlatformTag:
        return PlatformTag.MACOS_ARM64

    def install(self, artifact, workdir, context, emit):
        paths = context.paths
        emit(INFO, f"Installing to {paths.applications_dir}...")

        extract_zip(artifact, workdir)
        bundle = workdir / APP_BUNDLE_NAME
        if not bundle.is_dir():
            raise FileNotFoundError(f"{APP_BUNDLE_NAME} not found in {artifact.name}")

        target = paths.app_bundle
        _remove(target)
        paths.applications_dir.mkdir(parents=True, exist_ok=True)
        shutil.move(str(bundle), str(target))
        self._strip_quarantine(target)

        emit(SUCCESS, f"{context.settings.app_name} installed to {target}")
        emit(DETAIL, f"To run: open {target}")
        emit(DETAIL, "Or find it in Launchpad/Spotlight")
        return InstallationOutcome(
            platform_tag=self.tag,
            installed_path=str(target),
            run_command=f"open {target}",
        )

    @staticmethod
    def _strip_quarantine(target: Path) -> None:
        # Best effort: the attribute may be absent or xattr missing.
        if not shutil.which("xattr"):
            logger.debug("xattr not available; leaving quarantine flag")
            return
        result = run_command(["xattr", "-rd", QUARANTINE_ATTR, str(target)])
        if not result["ok"]:
            logger.debug("xattr quarantine removal skipped: %s", result["error"])


class LinuxX64Strategy(InstallStrategy):
    """Place the AppImage in ~/.local/bin with an ``opennow`` alias."""

    @property
    def tag(self) -> PlatformTag:
        return PlatformTag.LINUX_X64

    def install(self, artifact, workdir, context, emit):
        paths = context.paths
        emit(INFO, f"Installing AppImage to {paths.display(paths.bin_dir)}...")
        paths.bin_dir.mkdir(parents=True, exist_ok=True)

        artifact.chmod(artifact.stat().st_mode | 0o111)
        target = paths.appimage
        if target.is_symlink() or target.is_dir():
            _remove(target)
        shutil.move(str(artifact), str(target))

        alias = paths.command
        _remove(alias)
        alias.symlink_to(target)

        shown = paths.display(target)
        emit(SUCCESS, f"{context.settings.app_name} installed to {shown}")
        emit(DETAIL, f"To run: {shown}")
        emit(DETAIL, f"Or:     {COMMAND_NAME} (if {paths.display(paths.bin_dir)} is in PATH)")
        return InstallationOutcome(
            platform_tag=self.tag,
            installed_path=str(target),
            run_command=shown,
            alternate_commands=[COMMAND_NAME],
        )


class LinuxArm64Strategy(InstallStrategy):
    """Install the zip bundle under ~/.local/share and write a launcher."""

    @property
    def tag(self) -> PlatformTag:
        return PlatformTag.LINUX_ARM64

    def install(self, artifact, workdir, context, emit):
        paths = context.paths
        install_dir = paths.share_dir
        emit(INFO, f"Installing to {paths.display(install_dir)}...")
        paths.bin_dir.mkdir(parents=True, exist_ok=True)
        install_dir.parent.mkdir(parents=True, exist_ok=True)

        outcome = InstallationOutcome(
            platform_tag=self.tag,
            installed_path=str(install_dir),
            run_command=COMMAND_NAME,
        )

        extract_zip(artifact, workdir)
        bundle = workdir / BUNDLE_DIR_NAME
        if bundle.is_dir():
            _remove(install_dir)
            shutil.move(str(bundle), str(install_dir))
        else:
            logger.warning("%s has no %s/ directory", artifact.name, BUNDLE_DIR_NAME)
            outcome.warn(
                f"{artifact.name} contained no {BUNDLE_DIR_NAME}/ directory; "
                f"{paths.display(install_dir)} was left unchanged"
            )

        self._write_launcher(paths.command, install_dir)

        emit(SUCCESS, f"{context.settings.app_name} installed to {install_dir}")
        emit(DETAIL, f"To run: {COMMAND_NAME}")
        return outcome

    @staticmethod
    def _write_launcher(launcher: Path, install_dir: Path) -> None:
        # A symlink left by a linux-x64 install must not be written through.
        _remove(launcher)
        launcher.write_text(
            render_template(
                LAUNCHER_SCRIPT,
                {"install_dir": install_dir, "entry_point": ENTRY_POINT},
            ),
            encoding="utf-8",
        )
        launcher.chmod(0o755)


STRATEGIES: dict[PlatformTag, InstallStrategy] = {
    s.tag: s for s in (MacArm64Strategy(), LinuxX64Strategy(), LinuxArm64Strategy())
}

_missing = set(PlatformTag) - set(STRATEGIES)
if _missing:
    raise RuntimeError(f"No install strategy for: {sorted(t.value for t in _missing)}")


def strategy_for(tag: PlatformTag) -> InstallStrategy:
    return STRATEGIES[tag]
