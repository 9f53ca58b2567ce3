"""
L0 Data — GStreamer runtime packages per package manager.

Package names must match each distro's naming exactly. The install
command prefix mirrors what each manager expects non-interactively.
"""

from __future__ import annotations

from opennow_installer.core.models.platform import PackageManager

# ── Probe binaries ───────────────────────────────────────────────

MACOS_MANAGER: tuple[PackageManager, str] = (PackageManager.BREW, "brew")

# Priority order matters: first one found on PATH wins.
LINUX_MANAGERS: tuple[tuple[PackageManager, str], ...] = (
    (PackageManager.APT, "apt-get"),
    (PackageManager.DNF, "dnf"),
    (PackageManager.PACMAN, "pacman"),
    (PackageManager.ZYPPER, "zypper"),
)

HOMEBREW_INSTALL_COMMAND = (
    '/bin/bash -c "$(curl -fsSL '
    'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"'
)


# ── Package lists ────────────────────────────────────────────────

GSTREAMER_PACKAGES: dict[PackageManager, list[str]] = {
    PackageManager.BREW: [
        "gstreamer",
        "gst-plugins-base",
        "gst-plugins-good",
        "gst-plugins-bad",
        "gst-plugins-ugly",
        "gst-libav",
    ],
    PackageManager.APT: [
        "gstreamer1.0-plugins-base",
        "gstreamer1.0-plugins-good",
        "gstreamer1.0-plugins-bad",
        "gstreamer1.0-plugins-ugly",
        "gstreamer1.0-libav",
        "gstreamer1.0-tools",
    ],
    PackageManager.DNF: [
        "gstreamer1-plugins-base",
        "gstreamer1-plugins-good",
        "gstreamer1-plugins-bad-free",
        "gstreamer1-plugins-ugly-free",
        "gstreamer1-libav",
    ],
    PackageManager.PACMAN: [
        "gstreamer",
        "gst-plugins-base",
        "gst-plugins-good",
        "gst-plugins-bad",
        "gst-plugins-ugly",
        "gst-libav",
    ],
    PackageManager.ZYPPER: [
        "gstreamer-plugins-base",
        "gstreamer-plugins-good",
        "gstreamer-plugins-bad",
        "gstreamer-plugins-ugly",
        "gstreamer-plugins-libav",
    ],
}

# Shown when no supported manager was found.
CANONICAL_PACKAGES: list[str] = [
    "gstreamer1.0-plugins-base",
    "gstreamer1.0-plugins-good",
    "gstreamer1.0-plugins-bad",
    "gstreamer1.0-plugins-ugly",
    "gstreamer1.0-libav",
]


# ── PM command templates ─────────────────────────────────────────

_PM_INSTALL_CMD: dict[PackageManager, list[str]] = {
    PackageManager.BREW:   ["brew", "install"],
    PackageManager.APT:    ["apt-get", "install", "-y"],
    PackageManager.DNF:    ["dnf", "install", "-y"],
    PackageManager.PACMAN: ["pacman", "-S", "--noconfirm"],
    PackageManager.ZYPPER: ["zypper", "install", "-y"],
}

# Commands that must run before the install (index refresh).
_PM_PRE_INSTALL: dict[PackageManager, list[list[str]]] = {
    PackageManager.APT: [["apt-get", "update"]],
}

# Homebrew refuses to run as root; everything else needs it.
_PM_NEEDS_SUDO: dict[PackageManager, bool] = {
    PackageManager.BREW: False,
    PackageManager.APT: True,
    PackageManager.DNF: True,
    PackageManager.PACMAN: True,
    PackageManager.ZYPPER: True,
}


def install_commands(pm: PackageManager) -> list[list[str]]:
    """Commands that install the GStreamer runtime with ``pm``, in order.

    Returns an empty list for ``PackageManager.UNKNOWN``.
    """
    if pm not in _PM_INSTALL_CMD:
        return []
    commands = [list(cmd) for cmd in _PM_PRE_INSTALL.get(pm, [])]
    commands.append(_PM_INSTALL_CMD[pm] + GSTREAMER_PACKAGES[pm])
    return commands


def needs_sudo(pm: PackageManager) -> bool:
    return _PM_NEEDS_SUDO.get(pm, False)


# ── Verification ─────────────────────────────────────────────────

VERIFY_BINARY = "gst-inspect-1.0"
