"""
L4 Execution — PATH membership check and remediation text.

Never edits shell startup files; only tells the user what to add.
"""

from __future__ import annotations

import os
from pathlib import Path


def dir_on_path(directory: Path, path_value: str | None = None) -> bool:
    """Whether ``directory`` is one of the entries of ``$PATH``."""
    path_value = os.environ.get("PATH", "") if path_value is None else path_value
    wanted = os.path.realpath(directory)
    for entry in path_value.split(os.pathsep):
        if entry and os.path.realpath(os.path.expanduser(entry)) == wanted:
            return True
    return False


def _shell_config_line(shell_type: str, path_entry: str) -> str:
    """Shell-specific line that prepends ``path_entry`` to PATH."""
    if shell_type == "fish":
        return f"set -gx PATH {path_entry} $PATH"
    return f'export PATH="{path_entry}:$PATH"'


def path_remediation(path_entry: str = "$HOME/.local/bin", shell: str | None = None) -> tuple[str, str]:
    """Where to add the PATH entry and the line to add.

    Args:
        path_entry: Directory as it should appear in the config line.
        shell: Login shell path (default: ``$SHELL``).

    Returns:
        ``(config_files, line)``, e.g.
        ``("~/.bashrc or ~/.zshrc", 'export PATH="$HOME/.local/bin:$PATH"')``.
    """
    shell = os.environ.get("SHELL", "") if shell is None else shell
    shell_type = os.path.basename(shell)
    if shell_type == "fish":
        files = "~/.config/fish/config.fish"
        path_entry = path_entry.replace("$HOME", "~")
    else:
        files = "~/.bashrc or ~/.zshrc"
    return files, _shell_config_line(shell_type, path_entry)
