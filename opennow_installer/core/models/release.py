"""
Release models — what was published and what to download.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from opennow_installer.core.models.platform import PlatformTag


class ReleaseMetadata(BaseModel):
    """The latest published release, as reported by the repository API."""

    model_config = ConfigDict(frozen=True)

    tag_name: str

    @field_validator("tag_name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("tag_name must not be empty")
        return value


class ArtifactDescriptor(BaseModel):
    """One downloadable file for one platform tag of one release."""

    model_config = ConfigDict(frozen=True)

    platform_tag: PlatformTag
    filename: str
    download_url: str
