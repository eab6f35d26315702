"""Filesystem feature package exports."""

from .adapters import ManualFileSystem, NativeFileSystem
from .domain.models import (
    Backend,
    DirectoryCreationReport,
    FatalFileSystemError,
    FileSystemSettings,
    PathArg,
    PortafsError,
    SegmentAttempt,
)
from .domain.segments import segment_prefixes
from .usecases.create_directories import attempt_segments, create_directories
from .usecases.fatal import abort_process, raise_fatal
from .usecases.ports import FatalErrorHandler, FileSystemPort, MakeDirectoryPort

__all__ = [
    "Backend",
    "DirectoryCreationReport",
    "FatalErrorHandler",
    "FatalFileSystemError",
    "FileSystemPort",
    "FileSystemSettings",
    "MakeDirectoryPort",
    "ManualFileSystem",
    "NativeFileSystem",
    "PathArg",
    "PortafsError",
    "SegmentAttempt",
    "abort_process",
    "attempt_segments",
    "create_directories",
    "raise_fatal",
    "segment_prefixes",
]
