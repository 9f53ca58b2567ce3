"""
Tests for the Pydantic domain models.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from opennow_installer.core.models import (
    ArtifactDescriptor,
    InstallationOutcome,
    InstallContext,
    InstallPaths,
    OSFamily,
    PackageManager,
    PlatformIdentity,
    PlatformTag,
    ReleaseMetadata,
)


class TestPlatformIdentity:
    def test_is_linux(self):
        linux = PlatformIdentity(os=OSFamily.LINUX, arch="x86_64", tag=PlatformTag.LINUX_X64)
        mac = PlatformIdentity(os=OSFamily.MACOS, arch="arm64", tag=PlatformTag.MACOS_ARM64)
        assert linux.is_linux
        assert not mac.is_linux

    def test_frozen(self):
        identity = PlatformIdentity(os=OSFamily.LINUX, arch="x86_64", tag=PlatformTag.LINUX_X64)
        with pytest.raises(ValidationError):
            identity.tag = PlatformTag.LINUX_ARM64

    def test_tag_values(self):
        assert {t.value for t in PlatformTag} == {"macos-arm64", "linux-x64", "linux-arm64"}


class TestReleaseMetadata:
    def test_strips(self):
        assert ReleaseMetadata(tag_name=" v1.0.0\n").tag_name == "v1.0.0"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            ReleaseMetadata(tag_name="   ")

    def test_descriptor(self):
        a = ArtifactDescriptor(
            platform_tag=PlatformTag.LINUX_X64,
            filename="OpenNOW-linux-x64.AppImage",
            download_url="https://example/x",
        )
        assert a.platform_tag is PlatformTag.LINUX_X64


class TestInstallPaths:
    def test_layout(self, tmp_path):
        paths = InstallPaths.for_home(tmp_path)
        assert paths.applications_dir == Path("/Applications")
        assert paths.app_bundle == Path("/Applications/OpenNOW.app")
        assert paths.bin_dir == tmp_path / ".local/bin"
        assert paths.appimage == tmp_path / ".local/bin/OpenNOW.AppImage"
        assert paths.command == tmp_path / ".local/bin/opennow"
        assert paths.share_dir == tmp_path / ".local/share/opennow"
        assert paths.desktop_entry == tmp_path / ".local/share/applications/opennow.desktop"

    def test_defaults_to_home(self, tmp_path):
        # HOME is pointed at tmp_path/home by conftest
        assert InstallPaths.for_home().home == tmp_path / "home"

    def test_display(self, tmp_path):
        paths = InstallPaths.for_home(tmp_path)
        assert paths.display(paths.bin_dir) == "~/.local/bin"
        assert paths.display(Path("/opt/x")) == "/opt/x"


class TestInstallContext:
    def test_defaults(self):
        identity = PlatformIdentity(os=OSFamily.LINUX, arch="aarch64", tag=PlatformTag.LINUX_ARM64)
        context = InstallContext(platform=identity, package_manager=PackageManager.ZYPPER)
        assert context.install_dependencies is True
        assert context.settings.repository == "zortos293/OpenNOW"

    def test_frozen(self, make_context):
        context = make_context(PlatformTag.LINUX_X64)
        with pytest.raises(ValidationError):
            context.install_dependencies = True


class TestInstallationOutcome:
    def test_warn_and_to_dict(self):
        outcome = InstallationOutcome(
            platform_tag=PlatformTag.LINUX_X64,
            installed_path="/h/.local/bin/OpenNOW.AppImage",
            run_command="~/.local/bin/OpenNOW.AppImage",
        )
        outcome.warn("first")
        outcome.warn("second")
        d = outcome.to_dict()
        assert d["platform_tag"] == "linux-x64"
        assert d["warnings"] == ["first", "second"]
        assert d["desktop_entry"] is None
        assert d["alternate_commands"] == []
