from .loader import (
    CONFIG_ENV_VAR,
    EnvironmentPort,
    OsEnvironmentAdapter,
    default_environment,
    load_settings,
    resolve_settings,
)
from .models import Settings

__all__ = [
    "CONFIG_ENV_VAR",
    "EnvironmentPort",
    "OsEnvironmentAdapter",
    "Settings",
    "default_environment",
    "load_settings",
    "resolve_settings",
]
