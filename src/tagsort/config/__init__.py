"""Run configuration for tagsort."""

from .config import DEFAULT_PATTERN, DEFAULT_TEMPLATE, ConfigError, RunConfig, load_config_file
from .paths import CONFIG_ENV_VAR, resolve_config_path

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_PATTERN",
    "DEFAULT_TEMPLATE",
    "ConfigError",
    "RunConfig",
    "load_config_file",
    "resolve_config_path",
]
