"""Ports for the filesystem feature."""

from __future__ import annotations

from typing import NoReturn, Protocol

from ..domain.models import PathArg


class MakeDirectoryPort(Protocol):
    """Create exactly one directory, raising ``OSError`` on failure."""

    def __call__(self, path: str, mode: int, /) -> None:
        ...


class FatalErrorHandler(Protocol):
    """Terminate the current operation with ``message``; never returns."""

    def __call__(self, message: str, /) -> NoReturn:
        ...


class FileSystemPort(Protocol):
    """Uniform filesystem operations offered to host applications."""

    def create_directories(
        self,
        path: PathArg,
        mode: int | None = None,
        verbose: bool = False,
    ) -> bool:
        """Ensure every directory named by ``path`` exists."""

        ...

    def exists(self, path: PathArg) -> bool:
        """Return True when an entry exists at ``path``, following symlinks."""

        ...

    def current_path(self) -> str:
        """Return the process working directory."""

        ...

    def remove(self, path: PathArg) -> bool:
        """Remove exactly one file or empty directory."""

        ...

    def remove_all(self, path: PathArg) -> bool:
        """Remove ``path`` and everything beneath it."""

        ...


__all__ = ["FatalErrorHandler", "FileSystemPort", "MakeDirectoryPort"]
