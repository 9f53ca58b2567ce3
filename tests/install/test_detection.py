"""
Install — detection tests: platform tags, package manager priority,
GStreamer verification.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from opennow_installer.core.models import OSFamily, PackageManager, PlatformTag
from opennow_installer.core.services.install.detection.media_framework import (
    get_gstreamer_version,
)
from opennow_installer.core.services.install.detection.package_manager import (
    resolve_package_manager,
)
from opennow_installer.core.services.install.detection.platform import (
    detect_platform,
    normalize_os,
)
from tests.install.simulated_hosts import HOSTS, which_for

_MEDIA = "opennow_installer.core.services.install.detection.media_framework"


# ── Platform ────────────────────────────────────────────────────


class TestNormalizeOS:
    @pytest.mark.parametrize("name", ["Darwin", "darwin", "darwin23", "macOS"])
    def test_macos_spellings(self, name):
        assert normalize_os(name) is OSFamily.MACOS

    @pytest.mark.parametrize("name", ["Linux", "linux-gnu", "linux-musl"])
    def test_linux_spellings(self, name):
        assert normalize_os(name) is OSFamily.LINUX

    @pytest.mark.parametrize("name", ["Windows", "FreeBSD", "msys", ""])
    def test_unsupported(self, name):
        assert normalize_os(name) is None


class TestDetectPlatform:
    @pytest.mark.parametrize("arch", ["arm64", "x86_64", "aarch64", "ppc64le"])
    def test_every_macos_arch_gets_arm64_build(self, arch):
        identity = detect_platform("darwin", arch)
        assert identity is not None
        assert identity.tag is PlatformTag.MACOS_ARM64
        assert identity.translated is (arch != "arm64")

    @pytest.mark.parametrize("arch, tag", [
        ("x86_64", PlatformTag.LINUX_X64),
        ("aarch64", PlatformTag.LINUX_ARM64),
    ])
    def test_supported_linux(self, arch, tag):
        identity = detect_platform("linux-gnu", arch)
        assert identity.tag is tag
        assert identity.os is OSFamily.LINUX
        assert identity.translated is False

    @pytest.mark.parametrize("arch", ["arm64", "riscv64", "i686", "armv7l"])
    def test_unsupported_linux_arch(self, arch):
        assert detect_platform("linux-gnu", arch) is None

    def test_unsupported_os(self):
        assert detect_platform("Windows", "x86_64") is None

    def test_arch_is_case_insensitive(self):
        assert detect_platform("Linux", "X86_64").tag is PlatformTag.LINUX_X64

    def test_defaults_to_running_host(self):
        with patch("platform.system", return_value="Linux"), \
             patch("platform.machine", return_value="aarch64"):
            identity = detect_platform()
        assert identity.tag is PlatformTag.LINUX_ARM64

    @pytest.mark.parametrize("host_id", sorted(HOSTS))
    def test_simulated_hosts(self, host_id):
        host = HOSTS[host_id]
        identity = detect_platform(host["os"], host["arch"])
        if host["expected_tag"] is None:
            assert identity is None
        else:
            assert identity.tag is host["expected_tag"]


# ── Package manager ─────────────────────────────────────────────


class TestResolvePackageManager:
    @pytest.mark.parametrize(
        "host_id",
        sorted(h for h, p in HOSTS.items() if p["expected_pm"] is not None),
    )
    def test_simulated_hosts(self, host_id):
        host = HOSTS[host_id]
        os_family = normalize_os(host["os"])
        pm = resolve_package_manager(os_family, which=which_for(host["binaries"]))
        assert pm is host["expected_pm"]

    def test_linux_priority_order(self):
        everything = which_for({"apt-get", "dnf", "pacman", "zypper"})
        assert resolve_package_manager(OSFamily.LINUX, which=everything) is PackageManager.APT

        no_apt = which_for({"dnf", "pacman", "zypper"})
        assert resolve_package_manager(OSFamily.LINUX, which=no_apt) is PackageManager.DNF

        only_late = which_for({"zypper", "pacman"})
        assert resolve_package_manager(OSFamily.LINUX, which=only_late) is PackageManager.PACMAN

    def test_macos_ignores_linux_managers(self):
        linuxy = which_for({"apt-get", "dnf"})
        assert resolve_package_manager(OSFamily.MACOS, which=linuxy) is PackageManager.UNKNOWN

    def test_linux_never_picks_brew(self):
        linuxbrew = which_for({"brew"})
        assert resolve_package_manager(OSFamily.LINUX, which=linuxbrew) is PackageManager.UNKNOWN

    def test_deterministic(self):
        probes = which_for({"pacman", "dnf"})
        results = {resolve_package_manager(OSFamily.LINUX, which=probes) for _ in range(5)}
        assert results == {PackageManager.DNF}


# ── GStreamer verification ──────────────────────────────────────


def _mock_result(stdout: str = "", returncode: int = 0) -> MagicMock:
    m = MagicMock()
    m.stdout = stdout
    m.stderr = ""
    m.returncode = returncode
    return m


class TestGStreamerVersion:
    def test_not_on_path(self):
        with patch(f"{_MEDIA}.shutil.which", return_value=None), \
             patch(f"{_MEDIA}.subprocess.run") as mock_run:
            assert get_gstreamer_version() is None
            mock_run.assert_not_called()

    def test_reports_first_line(self):
        out = "gst-inspect-1.0 version 1.22.0\nGStreamer 1.22.0\n"
        with patch(f"{_MEDIA}.shutil.which", return_value="/usr/bin/gst-inspect-1.0"), \
             patch(f"{_MEDIA}.subprocess.run", return_value=_mock_result(out)) as mock_run:
            assert get_gstreamer_version() == "gst-inspect-1.0 version 1.22.0"
            assert mock_run.call_args[0][0] == ["/usr/bin/gst-inspect-1.0", "--version"]

    def test_nonzero_exit(self):
        with patch(f"{_MEDIA}.shutil.which", return_value="/usr/bin/gst-inspect-1.0"), \
             patch(f"{_MEDIA}.subprocess.run", return_value=_mock_result("x", returncode=1)):
            assert get_gstreamer_version() is None

    def test_cannot_execute(self):
        with patch(f"{_MEDIA}.shutil.which", return_value="/usr/bin/gst-inspect-1.0"), \
             patch(f"{_MEDIA}.subprocess.run", side_effect=PermissionError("denied")):
            assert get_gstreamer_version() is None
