"""Shared pytest fixtures for portafs tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point configuration at a missing file and reset cached singletons."""

    import portafs
    from portafs.config.config import Config

    monkeypatch.setenv("PORTAFS_CONFIG", str(tmp_path / "unused-config.toml"))
    Config.reset()
    monkeypatch.setattr(portafs, "_default_service", None)
    try:
        yield None
    finally:
        Config.reset()
