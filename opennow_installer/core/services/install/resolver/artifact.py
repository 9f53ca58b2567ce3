"""
L2 Resolver — Artifact naming.

Pure functions: (platform tag, release tag, repository) → filename and
download URL. No I/O.
"""

from __future__ import annotations

from opennow_installer.core.models.platform import PlatformTag
from opennow_installer.core.models.release import ArtifactDescriptor, ReleaseMetadata
from opennow_installer.core.models.settings import InstallerSettings

ARTIFACT_FILENAMES: dict[PlatformTag, str] = {
    PlatformTag.MACOS_ARM64: "OpenNOW-macos-arm64.zip",
    PlatformTag.LINUX_X64: "OpenNOW-linux-x64.AppImage",
    PlatformTag.LINUX_ARM64: "OpenNOW-linux-arm64.zip",
}


def artifact_filename(tag: PlatformTag) -> str:
    """Release asset name for ``tag``.

    Raises:
        KeyError: For a tag with no published artifact.
    """
    return ARTIFACT_FILENAMES[tag]


def resolve_artifact(
    tag: PlatformTag,
    release: ReleaseMetadata,
    settings: InstallerSettings,
) -> ArtifactDescriptor:
    """Build the descriptor for ``tag`` in ``release``.

    URL shape: ``<repository-url>/releases/download/<tag_name>/<filename>``.
    """
    filename = artifact_filename(tag)
    return ArtifactDescriptor(
        platform_tag=tag,
        filename=filename,
        download_url=(
            f"{settings.repository_url}/releases/download/"
            f"{release.tag_name}/{filename}"
        ),
    )
