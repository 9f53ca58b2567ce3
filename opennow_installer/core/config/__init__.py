"""Installer configuration — YAML file plus environment overrides."""

from opennow_installer.core.config.loader import ConfigError, load_settings

__all__ = ["ConfigError", "load_settings"]
