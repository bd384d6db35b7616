from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from kustcheck.settings.models import Settings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KUSTCHECK_CONFIG"


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        return os.environ.get(key, default)


default_environment = OsEnvironmentAdapter()


def load_settings(path: Path) -> Settings:
    """
    Load and validate the settings file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the file is unreadable, or YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    try:
        with open(path) as f:
            content = f.read()
    except OSError as e:
        raise ValueError(f"Could not read settings file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e


def resolve_settings(
    path: Path | str | None = None,
    *,
    env: EnvironmentPort = default_environment,
) -> Settings:
    """
    Pick the settings source: explicit path, then KUSTCHECK_CONFIG, then defaults.

    An explicit empty path is an error. An empty KUSTCHECK_CONFIG is ignored
    with a warning.
    """
    if path == "":
        raise ValueError("Settings path must not be empty")

    if path is None:
        path = env.get(CONFIG_ENV_VAR)
        if path == "":
            logger.warning("%s is set but empty; using default settings", CONFIG_ENV_VAR)
            return Settings()

    if path is None:
        logger.debug("No settings file configured; using defaults")
        return Settings()

    logger.debug("Loading settings from %s", path)
    return load_settings(Path(path))
