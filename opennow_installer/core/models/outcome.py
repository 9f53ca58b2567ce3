"""
Installation outcome — what the run produced and what the user should do next.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from opennow_installer.core.models.platform import PlatformTag


class InstallationOutcome(BaseModel):
    """Result of a completed install.

    Warnings are ordered as they were raised during the run.
    """

    platform_tag: PlatformTag
    installed_path: str
    run_command: str
    alternate_commands: list[str] = Field(default_factory=list)
    release_tag: str = ""
    desktop_entry: str | None = None
    warnings: list[str] = Field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
