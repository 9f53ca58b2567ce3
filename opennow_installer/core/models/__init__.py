"""
Domain models — Pydantic types for the installer.

All models are re-exported here for convenient access:

    from opennow_installer.core.models import InstallContext, PlatformTag
"""

from opennow_installer.core.models.context import InstallContext, InstallPaths
from opennow_installer.core.models.outcome import InstallationOutcome
from opennow_installer.core.models.platform import (
    OSFamily,
    PackageManager,
    PlatformIdentity,
    PlatformTag,
)
from opennow_installer.core.models.release import ArtifactDescriptor, ReleaseMetadata
from opennow_installer.core.models.settings import InstallerSettings

__all__ = [
    # release.py
    "ArtifactDescriptor",
    # context.py
    "InstallContext",
    "InstallPaths",
    # outcome.py
    "InstallationOutcome",
    # settings.py
    "InstallerSettings",
    # platform.py
    "OSFamily",
    "PackageManager",
    "PlatformIdentity",
    "PlatformTag",
    "ReleaseMetadata",
]
