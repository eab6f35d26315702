"""Application service selecting and wiring a filesystem backend."""

from __future__ import annotations

import os
from pathlib import Path
from typing import final

from portafs.config.config import Config
from portafs.features.filesystem import (
    Backend,
    FileSystemPort,
    FileSystemSettings,
    ManualFileSystem,
    NativeFileSystem,
    PathArg,
)
from portafs.features.filesystem.usecases.fatal import raise_fatal
from portafs.features.filesystem.usecases.ports import FatalErrorHandler


def resolve_backend(backend: Backend, *, os_name: str | None = None) -> Backend:
    """Map ``auto`` onto the backend matching the running platform."""

    if backend is not Backend.AUTO:
        return backend
    return Backend.NATIVE if (os_name or os.name) == "nt" else Backend.MANUAL


def get_filesystem(
    settings: FileSystemSettings | None = None,
    *,
    on_fatal: FatalErrorHandler = raise_fatal,
) -> FileSystemPort:
    """Return the backend named by ``settings``."""

    active = settings or FileSystemSettings()
    if resolve_backend(active.backend) is Backend.NATIVE:
        return NativeFileSystem(active, on_fatal=on_fatal)
    return ManualFileSystem(active, on_fatal=on_fatal)


@final
class FileSystemService:
    """Application façade exposing the uniform filesystem operations."""

    _filesystem: FileSystemPort

    def __init__(
        self,
        settings: FileSystemSettings | None = None,
        *,
        filesystem: FileSystemPort | None = None,
        on_fatal: FatalErrorHandler = raise_fatal,
    ) -> None:
        self.settings = settings or FileSystemSettings()
        self._filesystem = (
            filesystem if filesystem is not None else get_filesystem(self.settings, on_fatal=on_fatal)
        )

    @classmethod
    def from_config(
        cls,
        config_path: Path | None = None,
        *,
        verbosity: int | None = None,
        backend: str | None = None,
        on_fatal: FatalErrorHandler = raise_fatal,
    ) -> "FileSystemService":
        """Build a service from the TOML configuration with optional overrides."""

        configuration = Config.load(config_path)
        settings = configuration.to_settings(verbosity=verbosity, backend=backend)
        return cls(settings, on_fatal=on_fatal)

    @property
    def filesystem(self) -> FileSystemPort:
        return self._filesystem

    def create_directories(
        self,
        path: PathArg,
        mode: int | None = None,
        verbose: bool | None = None,
    ) -> bool:
        """Create ``path`` and its ancestors; ``verbose`` defaults to the settings."""

        report_all = self.settings.is_verbose if verbose is None else verbose
        return self._filesystem.create_directories(path, mode, report_all)

    def exists(self, path: PathArg) -> bool:
        return self._filesystem.exists(path)

    def current_path(self) -> str:
        return self._filesystem.current_path()

    def remove(self, path: PathArg) -> bool:
        return self._filesystem.remove(path)

    def remove_all(self, path: PathArg) -> bool:
        return self._filesystem.remove_all(path)


__all__ = ["FileSystemService", "get_filesystem", "resolve_backend"]
