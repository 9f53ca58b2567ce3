"""
L2 Resolver — release lookup and artifact naming.
"""

from opennow_installer.core.services.install.resolver.artifact import (  # noqa: F401
    ARTIFACT_FILENAMES,
    artifact_filename,
    resolve_artifact,
)
from opennow_installer.core.services.install.resolver.release import (  # noqa: F401
    fetch_latest_release,
    parse_tag_name,
)
