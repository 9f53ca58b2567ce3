"""
Configuration loader — reads installer.yml into InstallerSettings.

The installer runs fine with no config file at all; the file and the
environment only override where releases come from.

Sources, lowest to highest precedence:
    built-in defaults  <  YAML file  <  OPENNOW_* env vars
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from opennow_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OPENNOW_INSTALLER_CONFIG"
DEFAULT_CONFIG_FILE = Path("~/.config/opennow/installer.yml")

# env var → settings field
_ENV_OVERRIDES = {
    "OPENNOW_REPOSITORY": "repository",
    "OPENNOW_API_URL": "api_url",
    "OPENNOW_DOWNLOAD_URL": "download_url",
}


class ConfigError(Exception):
    """Raised when installer configuration is invalid or missing."""


def find_config_file(environ: dict[str, str] | None = None) -> tuple[Path | None, bool]:
    """Locate the config file to use.

    Returns:
        ``(path, explicit)``. ``explicit`` is True when the path came
        from ``OPENNOW_INSTALLER_CONFIG`` and must therefore exist.
    """
    env = os.environ if environ is None else environ
    configured = env.get(CONFIG_ENV_VAR)
    if configured:
        return Path(configured).expanduser(), True

    default = DEFAULT_CONFIG_FILE.expanduser()
    if default.is_file():
        return default, False
    return None, False


def load_settings(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> InstallerSettings:
    """Load and validate installer settings.

    Args:
        path: Explicit config file (``--config``). Must exist if given.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Validated InstallerSettings.

    Raises:
        ConfigError: If an explicit file is missing or any source is invalid.
    """
    env = os.environ if environ is None else environ
    explicit = path is not None
    if path is None:
        path, explicit = find_config_file(env)

    data: dict = {}
    if path is not None:
        data = _read_yaml(path, required=explicit)

    for var, field in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            logger.debug("Setting %s from %s", field, var)
            data[field] = value

    try:
        settings = InstallerSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.info("Installing from repository %s", settings.repository)
    return settings


def _read_yaml(path: Path, *, required: bool) -> dict:
    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    logger.debug("Loading installer config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under an "installer" key or be flat
    section = data.get("installer", data)
    if not isinstance(section, dict):
        raise ConfigError(
            f"Expected a YAML mapping under 'installer' in {path}, "
            f"got {type(section).__name__}"
        )
    return dict(section)
