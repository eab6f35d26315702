"""Data structures describing directory creation attempts and fatal failures."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from enum import Enum
from typing import Final, TypeAlias


PathArg: TypeAlias = "str | os.PathLike[str]"

DEFAULT_SEPARATOR: Final[str] = "/"
DEFAULT_DIRECTORY_MODE: Final[int] = 0o755
DEFAULT_REMOVE_ALL_PATH_LIMIT: Final[int] = 1990


class PortafsError(Exception):
    """Base exception for all portafs errors."""


class FatalFileSystemError(PortafsError):
    """Unrecoverable failure raised by the default fatal-error handler."""


class Backend(str, Enum):
    """Represent which filesystem backend should service calls."""

    AUTO = "auto"
    NATIVE = "native"
    MANUAL = "manual"

    @staticmethod
    def from_user_input(value: str) -> "Backend":
        """Translate raw config or CLI input into the matching backend."""

        normalized = value.strip().lower()
        for backend in Backend:
            if backend.value == normalized:
                return backend
        valid: Final[str] = ", ".join(b.value for b in Backend)
        msg = f"Unsupported backend '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class SegmentAttempt:
    """Outcome of creating one ancestor directory.

    ``error_code`` is ``0`` when the directory was created and the ``errno``
    value reported by the primitive otherwise.
    """

    path: str
    error_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.error_code in (0, errno.EEXIST)

    @property
    def reason(self) -> str:
        return os.strerror(self.error_code)


@dataclass(slots=True, frozen=True)
class DirectoryCreationReport:
    """All segment attempts made while creating ``path``, root to leaf."""

    path: str
    attempts: tuple[SegmentAttempt, ...] = ()

    @property
    def succeeded(self) -> bool:
        return all(attempt.succeeded for attempt in self.attempts)

    @property
    def failures(self) -> tuple[SegmentAttempt, ...]:
        return tuple(attempt for attempt in self.attempts if not attempt.succeeded)


@dataclass(slots=True, frozen=True)
class FileSystemSettings:
    """Explicit configuration threaded into every backend."""

    verbosity: int = 0
    backend: Backend = Backend.AUTO
    directory_mode: int = DEFAULT_DIRECTORY_MODE
    separator: str = DEFAULT_SEPARATOR
    remove_all_path_limit: int | None = DEFAULT_REMOVE_ALL_PATH_LIMIT

    def __post_init__(self) -> None:
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be non-negative; received {self.verbosity}")
        if len(self.separator) != 1:
            raise ValueError(f"separator must be a single character; received {self.separator!r}")

    @property
    def is_verbose(self) -> bool:
        return self.verbosity > 0


__all__ = [
    "Backend",
    "DEFAULT_DIRECTORY_MODE",
    "DEFAULT_REMOVE_ALL_PATH_LIMIT",
    "DEFAULT_SEPARATOR",
    "DirectoryCreationReport",
    "FatalFileSystemError",
    "FileSystemSettings",
    "PathArg",
    "PortafsError",
    "SegmentAttempt",
]
