"""Configuration management for tagsort."""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Final

from tagsort.platform.logging import logger

DEFAULT_TEMPLATE: Final[str] = "%a/%A"
DEFAULT_PATTERN: Final[str] = "*.mp3"


class ConfigError(ValueError):
    """Raised when a configuration file holds unknown keys or bad values."""


def _path_field(default_factory: Any = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default_factory: Factory for the default value, or None for no path.

    Returns:
        Field with proper metadata for path handling.
    """
    if default_factory is None:
        return field(default=None, metadata={"path": True})
    return field(default_factory=default_factory, metadata={"path": True})


@dataclass(frozen=True)
class RunConfig:
    """Run-wide configuration, immutable once traversal begins."""

    # Placeholder template rendered per file
    template: str = DEFAULT_TEMPLATE

    # Scan root and placement root
    base_dir: Path = _path_field(Path.cwd)
    target_dir: Path = _path_field(Path.cwd)

    use_copy: bool = False
    dry_run: bool = False
    replace_spaces: bool = False
    allow_missing_album_info: bool = True

    # Number of -v flags given on the command line
    verbosity: int = 0

    # Glob matched against file names during the scan
    pattern: str = DEFAULT_PATTERN

    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                object.__setattr__(self, f.name, Path(value).expanduser() if value else None)

    @classmethod
    def from_sources(cls, *layers: Mapping[str, Any]) -> "RunConfig":
        """Build a configuration from defaults overridden by each layer in turn.

        Args:
            *layers: Mappings of field name to value. ``None`` values are
                ignored so unset command-line flags do not mask earlier layers.

        Returns:
            RunConfig: The merged configuration.
        """
        merged: dict[str, Any] = {}
        for layer in layers:
            merged.update({key: value for key, value in layer.items() if value is not None})
        return replace(cls(), **merged)


_EXPECTED_TYPES: Final[dict[str, type]] = {
    "template": str,
    "base_dir": str,
    "target_dir": str,
    "use_copy": bool,
    "dry_run": bool,
    "replace_spaces": bool,
    "allow_missing_album_info": bool,
    "verbosity": int,
    "pattern": str,
    "log_file": str,
}


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration overrides from a TOML file.

    Args:
        path: TOML file to read.

    Returns:
        dict[str, Any]: Validated overrides keyed by ``RunConfig`` field name.

    Raises:
        ConfigError: If the file is missing, malformed, or holds unknown keys
            or values of the wrong type.
    """
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        expected = _EXPECTED_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"Unknown configuration key '{key}' in {path}")
        # bool is a subclass of int; reject it where a count is expected
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(
                f"Configuration key '{key}' in {path} must be of type {expected.__name__}"
            )
        overrides[key] = value

    logger.debug("Configuration loaded from %s", path)
    return overrides


__all__ = [
    "DEFAULT_PATTERN",
    "DEFAULT_TEMPLATE",
    "ConfigError",
    "RunConfig",
    "load_config_file",
]
