"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
"""

from opennow_installer.core.services.install.detection.media_framework import (  # noqa: F401
    get_gstreamer_version,
)
from opennow_installer.core.services.install.detection.package_manager import (  # noqa: F401
    resolve_package_manager,
)
from opennow_installer.core.services.install.detection.platform import (  # noqa: F401
    detect_platform,
    host_arch,
    host_os,
    normalize_os,
)
