"""
Fatal installer errors.

Probes and executors report absence or failure through return values.
Only the orchestration layer decides a condition is fatal and raises
``InstallError``; the CLI turns it into a diagnostic and exit code 1.
"""

from __future__ import annotations


class InstallError(Exception):
    """A condition that aborts the run.

    Attributes:
        message: What failed.
        remediation: Optional command or instruction that fixes it.
    """

    def __init__(self, message: str, remediation: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.remediation = remediation
