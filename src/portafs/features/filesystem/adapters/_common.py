"""Helpers shared by both filesystem backends."""

from __future__ import annotations

import errno
import os
import stat

from portafs.platform.logging import logger

from ..domain.models import FileSystemSettings, PathArg

EXISTS_EVENT = "filesystem.exists.error"


def remove_entry(path: PathArg) -> None:
    """Remove one entry: ``rmdir`` for real directories, ``remove`` otherwise."""

    if stat.S_ISDIR(os.lstat(path).st_mode):
        os.rmdir(path)
    else:
        os.remove(path)


def log_exists_failure(path: PathArg, exc: Exception, settings: FileSystemSettings) -> None:
    """Report an unexpected existence-check error when verbosity is raised."""

    if not settings.is_verbose:
        return
    if isinstance(exc, OSError) and exc.errno in (errno.ENOENT, errno.ENOTDIR):
        return
    logger.info(
        "exists: checking %s failed: %s",
        os.fspath(path),
        exc,
        extra={"fs_event": EXISTS_EVENT, "segment_path": os.fspath(path)},
    )


def describe_error(exc: Exception) -> str:
    """Prefer the OS message; fall back to the exception text."""

    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


__all__ = ["EXISTS_EVENT", "describe_error", "log_exists_failure", "remove_entry"]
