"""
L4 Execution — everything that changes the system: package installs,
downloads, extraction, file placement, desktop entries.
"""

from opennow_installer.core.services.install.execution.archive import (  # noqa: F401
    extract_zip,
)
from opennow_installer.core.services.install.execution.dependencies import (  # noqa: F401
    DependencyResult,
    install_media_framework,
)
from opennow_installer.core.services.install.execution.desktop import (  # noqa: F401
    write_desktop_entry,
)
from opennow_installer.core.services.install.execution.download import (  # noqa: F401
    download_artifact,
    scoped_workdir,
)
from opennow_installer.core.services.install.execution.shell_path import (  # noqa: F401
    dir_on_path,
    path_remediation,
)
from opennow_installer.core.services.install.execution.strategies import (  # noqa: F401
    STRATEGIES,
    InstallStrategy,
    strategy_for,
)
from opennow_installer.core.services.install.execution.subprocess_runner import (  # noqa: F401
    run_command,
)
