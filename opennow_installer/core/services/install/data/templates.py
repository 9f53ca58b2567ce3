"""
L0 Data — File templates written during installation.

Templates use ``{key}`` placeholders filled by ``render_template``.
Simple string replacement — no Jinja, no escaping.
"""

from __future__ import annotations

# ── linux-arm64 launcher ─────────────────────────────────────────
#
# The zip bundle ships its own shared libraries under lib/ and the
# streamer binary at the bundle root.

LAUNCHER_SCRIPT = """\
#!/bin/bash
SCRIPT_DIR="{install_dir}"
export LD_LIBRARY_PATH="$SCRIPT_DIR/lib:$LD_LIBRARY_PATH"
export GST_REGISTRY_UPDATE=yes
exec "$SCRIPT_DIR/{entry_point}" "$@"
"""

ENTRY_POINT = "opennow-streamer"


# ── Desktop entry (freedesktop.org) ──────────────────────────────

DESKTOP_ENTRY = """\
[Desktop Entry]
Name={app_name}
Comment=Open Source GeForce NOW Client
Exec={exec_path}
Icon=applications-games
Terminal=false
Type=Application
Categories=Game;
"""


def render_template(template: str, values: dict[str, object]) -> str:
    """Substitute ``{key}`` placeholders with ``values``.

    Unknown placeholders are left as-is.
    """
    result = template
    for key, value in values.items():
        result = result.replace(f"{{{key}}}", str(value))
    return result
