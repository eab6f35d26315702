"""Tests for configuration path resolution helpers."""

from pathlib import Path

import portafs.config.paths as paths
from portafs.config.paths import default_config_path, resolve_overridable_path


def test_no_log_location_is_exported() -> None:
    """Log files come only from configuration, so no default log path exists."""

    assert set(paths.__all__) == {"default_config_path", "resolve_overridable_path"}
    assert not hasattr(paths, "default_log_file")


def test_default_config_path_uses_repo_root(portable_repo_root: Path) -> None:
    """Without an override the config lives under <repo_root>/config."""

    assert default_config_path() == portable_repo_root / "config" / "config.toml"


def test_default_config_path_honors_environment(tmp_path: Path) -> None:
    """PORTAFS_CONFIG should win over the repository default."""

    override = tmp_path / "elsewhere" / "portafs.toml"
    assert default_config_path({"PORTAFS_CONFIG": str(override)}) == override.resolve()


def test_resolve_overridable_path_prefers_explicit(tmp_path: Path) -> None:
    """An explicit path beats both the environment and the default."""

    explicit = tmp_path / "explicit.toml"
    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"VAR": str(tmp_path / "env.toml")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == explicit.resolve()


def test_resolve_overridable_path_ignores_blank_environment(tmp_path: Path) -> None:
    """Whitespace-only environment values fall through to the default."""

    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": "   "},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == (tmp_path / "default.toml").resolve()
