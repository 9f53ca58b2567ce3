"""
L0 Data — static tables: packages per manager, artifact names, templates.

No I/O, no subprocess.
"""

from opennow_installer.core.services.install.data.packages import (  # noqa: F401
    CANONICAL_PACKAGES,
    GSTREAMER_PACKAGES,
    HOMEBREW_INSTALL_COMMAND,
    LINUX_MANAGERS,
    MACOS_MANAGER,
    VERIFY_BINARY,
    install_commands,
    needs_sudo,
)
from opennow_installer.core.services.install.data.templates import (  # noqa: F401
    DESKTOP_ENTRY,
    ENTRY_POINT,
    LAUNCHER_SCRIPT,
    render_template,
)
