"""Location of the optional configuration file.

A config file is only read when one is named explicitly or through the
``TAGSORT_CONFIG`` environment variable; tagsort never creates one.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "TAGSORT_CONFIG"


def resolve_config_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None = None,
    env_var: str = CONFIG_ENV_VAR,
) -> Path | None:
    """Resolve the config file path honoring explicit and environment overrides.

    Args:
        explicit_path: Path given on the command line, if any.
        env: Environment mapping. Defaults to ``os.environ``.
        env_var: Environment variable consulted when no explicit path is given.

    Returns:
        Path | None: Absolute config path, or None when none was requested.
    """

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip()
    if candidate:
        return Path(candidate).expanduser().resolve()
    return None


__all__ = ["CONFIG_ENV_VAR", "resolve_config_path"]
