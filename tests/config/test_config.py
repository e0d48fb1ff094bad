"""Tests for run configuration and config file loading."""

from pathlib import Path

import pytest

from tagsort.config import (
    DEFAULT_TEMPLATE,
    ConfigError,
    RunConfig,
    load_config_file,
    resolve_config_path,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    config = RunConfig()

    assert config.template == DEFAULT_TEMPLATE == "%a/%A"
    assert config.base_dir == Path.cwd()
    assert config.target_dir == Path.cwd()
    assert not config.use_copy and not config.dry_run and not config.replace_spaces
    assert config.allow_missing_album_info
    assert config.verbosity == 0
    assert config.pattern == "*.mp3"
    assert config.log_file is None


def test_is_immutable() -> None:
    config = RunConfig()

    with pytest.raises(AttributeError):
        config.dry_run = True  # type: ignore[misc]


def test_string_paths_are_converted() -> None:
    config = RunConfig(base_dir="/music/in", target_dir="/music/out", log_file="")  # type: ignore[arg-type]

    assert config.base_dir == Path("/music/in")
    assert config.target_dir == Path("/music/out")
    assert config.log_file is None


def test_later_layers_win_and_none_is_ignored() -> None:
    config = RunConfig.from_sources(
        {"template": "%g/%a", "use_copy": True, "verbosity": 1},
        {"template": "%a", "use_copy": None, "verbosity": None},
    )

    assert config.template == "%a"
    assert config.use_copy is True
    assert config.verbosity == 1


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "tagsort.toml"
    _ = path.write_text(
        'template = "%g/%a"\ntarget_dir = "/srv/music"\nuse_copy = true\nverbosity = 2\n',
        encoding="utf-8",
    )

    assert load_config_file(path) == {
        "template": "%g/%a",
        "target_dir": "/srv/music",
        "use_copy": True,
        "verbosity": 2,
    }


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("colour = 'blue'\n", "Unknown configuration key 'colour'"),
        ("use_copy = 'yes'\n", "'use_copy'.*must be of type bool"),
        ("verbosity = true\n", "'verbosity'.*must be of type int"),
        ("template = \n", "Invalid TOML"),
    ],
)
def test_load_config_file_rejects_bad_content(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "bad.toml"
    _ = path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        _ = load_config_file(path)


def test_load_config_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        _ = load_config_file(tmp_path / "absent.toml")


def test_resolve_config_path(tmp_path: Path) -> None:
    explicit = tmp_path / "a.toml"
    from_env = tmp_path / "b.toml"

    assert resolve_config_path(explicit_path=explicit, env={}) == explicit.resolve()
    assert resolve_config_path(explicit_path=None, env={"TAGSORT_CONFIG": str(from_env)}) == from_env.resolve()
    assert resolve_config_path(explicit_path=None, env={"TAGSORT_CONFIG": "  "}) is None
    assert resolve_config_path(explicit_path=None, env={}) is None
