"""
Progress events — how pipeline steps talk to whoever is watching.

Steps call ``emit(level, message)``; the CLI renders the lines, tests
collect them. Levels: ``info``, ``success``, ``warn``, ``detail``.
"""

from __future__ import annotations

from typing import Callable

INFO = "info"
SUCCESS = "success"
WARN = "warn"
DETAIL = "detail"

Emit = Callable[[str, str], None]


def null_emit(level: str, message: str) -> None:
    """Discard events."""
