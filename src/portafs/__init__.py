"""portafs: portable directory creation, existence checks and removal.

The module-level functions delegate to a process-wide default backend built
from ``FileSystemSettings()``. Hosts call ``configure`` once at startup to
change verbosity, backend or the fatal-error handler.
"""

from __future__ import annotations

from portafs.application.services import FileSystemService, get_filesystem
from portafs.config.config import Config, ConfigError
from portafs.features.filesystem import (
    Backend,
    DirectoryCreationReport,
    FatalFileSystemError,
    FileSystemPort,
    FileSystemSettings,
    ManualFileSystem,
    NativeFileSystem,
    PathArg,
    PortafsError,
    SegmentAttempt,
    abort_process,
    raise_fatal,
)
from portafs.features.filesystem.usecases.ports import FatalErrorHandler

__version__ = "0.1.0"

_default_service: FileSystemService | None = None


def configure(
    settings: FileSystemSettings | None = None,
    *,
    on_fatal: FatalErrorHandler = raise_fatal,
) -> FileSystemService:
    """Replace the default backend used by the module-level functions."""

    global _default_service
    _default_service = FileSystemService(settings, on_fatal=on_fatal)
    return _default_service


def _service() -> FileSystemService:
    if _default_service is None:
        return configure()
    return _default_service


def create_directories(path: PathArg, mode: int | None = None, verbose: bool = False) -> bool:
    """Create ``path`` and any missing ancestors; True when all segments exist."""

    return _service().create_directories(path, mode, verbose)


def exists(path: PathArg) -> bool:
    """Return True when something exists at ``path``."""

    return _service().exists(path)


def current_path() -> str:
    """Return the current working directory, escalating failures as fatal."""

    return _service().current_path()


def remove(path: PathArg) -> bool:
    """Remove a single file or empty directory."""

    return _service().remove(path)


def remove_all(path: PathArg) -> bool:
    """Remove ``path`` recursively."""

    return _service().remove_all(path)


__all__ = [
    "Backend",
    "Config",
    "ConfigError",
    "DirectoryCreationReport",
    "FatalFileSystemError",
    "FileSystemPort",
    "FileSystemService",
    "FileSystemSettings",
    "ManualFileSystem",
    "NativeFileSystem",
    "PortafsError",
    "SegmentAttempt",
    "abort_process",
    "configure",
    "create_directories",
    "current_path",
    "exists",
    "get_filesystem",
    "remove",
    "remove_all",
]
