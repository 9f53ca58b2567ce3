"""
L5 Orchestration — the top-level install pipeline.
"""

from opennow_installer.core.services.install.orchestration.orchestrator import (  # noqa: F401
    detect_host,
    run_install,
)
