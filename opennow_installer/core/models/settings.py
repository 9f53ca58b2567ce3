"""
Installer settings — the validated configuration for one run.

Loaded by ``opennow_installer.core.config.loader`` from an optional
YAML file plus environment overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InstallerSettings(BaseModel):
    """Where releases come from and how to talk to the release API."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    repository: str = "zortos293/OpenNOW"   # owner/name on GitHub
    api_url: str = "https://api.github.com"
    download_url: str = "https://github.com"
    app_name: str = "OpenNOW"
    user_agent: str = "opennow-installer/0.1"
    http_timeout: float | None = Field(default=None, gt=0)  # None = transport default

    @property
    def repository_url(self) -> str:
        """Browser URL of the repository (``<download_url>/<repository>``)."""
        return f"{self.download_url.rstrip('/')}/{self.repository}"

    @property
    def latest_release_endpoint(self) -> str:
        return f"{self.api_url.rstrip('/')}/repos/{self.repository}/releases/latest"

    @property
    def issues_url(self) -> str:
        return f"{self.repository_url}/issues"
