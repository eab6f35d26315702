"""Tests for loading, validating and saving the TOML configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from portafs.config.config import Config, ConfigError
from portafs.features.filesystem import Backend


def test_load_missing_file_returns_defaults(tmp_path: Path) -> None:
    """A missing config file yields defaults and writes nothing."""

    target = tmp_path / "absent.toml"
    config = Config.load(target)

    assert config.verbosity == 0
    assert config.backend == "auto"
    assert config.directory_mode == 0o755
    assert config.separator == "/"
    assert config.remove_all_path_limit == 1990
    assert config.log_file is None
    assert not target.exists()


def test_load_reads_values(write_config) -> None:
    """Values from the file override defaults, including octal strings."""

    path = write_config(
        'verbosity = 2\nbackend = "Native"\ndirectory_mode = "0o700"\n'
        'remove_all_path_limit = 0\nlog_file = "/var/log/portafs.log"\n'
    )
    config = Config.load(path)

    assert config.verbosity == 2
    assert config.backend == "native"
    assert config.directory_mode == 0o700
    assert config.remove_all_path_limit == 0
    assert config.log_file == Path("/var/log/portafs.log")


def test_load_caches_instance_per_file(write_config) -> None:
    """Loading the same file twice returns the cached instance until reset."""

    path = write_config("verbosity = 1\n")
    first = Config.load(path)
    assert Config.load(path) is first

    Config.reset()
    assert Config.load(path) is not first


def test_load_warns_about_unknown_keys(write_config, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""

    caplog.set_level(logging.WARNING, logger="portafs")
    path = write_config("verbosity = 0\nfrobnicate = true\n")

    _ = Config.load(path)

    assert any("frobnicate" in message for message in caplog.messages)


@pytest.mark.parametrize(
    "content",
    [
        'backend = "zfs"\n',
        "verbosity = -1\n",
        'directory_mode = "rwx"\n',
        'separator = "::"\n',
        "remove_all_path_limit = -5\n",
        "verbosity = [\n",
    ],
)
def test_load_rejects_invalid_files(write_config, content: str) -> None:
    """Invalid values and malformed TOML surface as ConfigError."""

    path = write_config(content)
    with pytest.raises(ConfigError):
        _ = Config.load(path)


def test_save_round_trips_through_load(tmp_path: Path) -> None:
    """A saved config reloads with identical values."""

    original = Config(verbosity=3, backend="manual", directory_mode=0o750, log_file=tmp_path / "x.log")
    target = original.save(tmp_path / "nested" / "config.toml")

    Config.reset()
    reloaded = Config.load(target)

    assert reloaded == original
    assert "# portafs Configuration File" in target.read_text(encoding="utf-8")


def test_to_settings_applies_overrides() -> None:
    """CLI overrides replace configured verbosity and backend."""

    config = Config(verbosity=0, backend="native", remove_all_path_limit=0)
    settings = config.to_settings(verbosity=1, backend="manual")

    assert settings.verbosity == 1
    assert settings.backend is Backend.MANUAL
    assert settings.remove_all_path_limit is None
    assert settings.directory_mode == 0o755
