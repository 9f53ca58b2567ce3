"""
Install service — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → resolver → detection → execution →
orchestration)::

    from opennow_installer.core.services.install import detect_host, run_install
"""

# ── L2: Resolver ──
from opennow_installer.core.services.install.resolver.artifact import (  # noqa: F401
    resolve_artifact,
)
from opennow_installer.core.services.install.resolver.release import (  # noqa: F401
    fetch_latest_release,
)

# ── L3: Detection ──
from opennow_installer.core.services.install.detection.package_manager import (  # noqa: F401
    resolve_package_manager,
)
from opennow_installer.core.services.install.detection.platform import (  # noqa: F401
    detect_platform,
)

# ── Errors ──
from opennow_installer.core.services.install.errors import InstallError  # noqa: F401

# ── L5: Orchestration ──
from opennow_installer.core.services.install.orchestration.orchestrator import (  # noqa: F401
    detect_host,
    run_install,
)
