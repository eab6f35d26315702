"""
Summary: Create a directory chain segment by segment and report each attempt.
Why: Tolerate pre-existing ancestors while still surfacing every failed segment.
"""

from __future__ import annotations

import errno
import logging
import os

from portafs.platform.logging import logger as default_logger

from ..domain.models import (
    DEFAULT_DIRECTORY_MODE,
    DEFAULT_SEPARATOR,
    DirectoryCreationReport,
    SegmentAttempt,
)
from ..domain.segments import segment_prefixes
from .ports import MakeDirectoryPort

SEGMENT_EVENT = "directories.segment"


def attempt_segment(path: str, mode: int, make_directory: MakeDirectoryPort) -> SegmentAttempt:
    """Try to create one directory and capture the resulting error code."""

    try:
        make_directory(path, mode)
    except OSError as exc:
        return SegmentAttempt(path=path, error_code=exc.errno or errno.EIO)
    except ValueError:
        # embedded NUL and similar names the OS never sees
        return SegmentAttempt(path=path, error_code=errno.EINVAL)
    return SegmentAttempt(path=path)


def attempt_segments(
    path: str,
    mode: int = DEFAULT_DIRECTORY_MODE,
    *,
    make_directory: MakeDirectoryPort = os.mkdir,
    separator: str = DEFAULT_SEPARATOR,
) -> DirectoryCreationReport:
    """Attempt every ancestor of ``path`` without stopping at failures."""

    attempts = tuple(
        attempt_segment(prefix, mode, make_directory)
        for prefix in segment_prefixes(path, separator)
    )
    return DirectoryCreationReport(path=path, attempts=attempts)


def log_report(
    report: DirectoryCreationReport,
    *,
    verbose: bool,
    log: logging.Logger | None = None,
) -> None:
    """Emit one diagnostic line per attempt when the call failed or verbose is set."""

    failed = not report.succeeded
    if not failed and not verbose:
        return

    active_logger = log or default_logger
    for attempt in report.attempts:
        level = logging.ERROR if failed and not attempt.succeeded else logging.INFO
        active_logger.log(
            level,
            "create_directories: path errno: %s :: %s",
            attempt.path,
            attempt.reason,
            extra={
                "fs_event": SEGMENT_EVENT,
                "segment_path": attempt.path,
                "error_code": attempt.error_code,
                "segment_ok": attempt.succeeded,
                "reason": attempt.reason,
            },
        )


def create_directories(
    path: str,
    mode: int = DEFAULT_DIRECTORY_MODE,
    verbose: bool = False,
    *,
    make_directory: MakeDirectoryPort = os.mkdir,
    separator: str = DEFAULT_SEPARATOR,
    log: logging.Logger | None = None,
) -> bool:
    """Ensure the full directory chain named by ``path`` exists.

    Args:
        path: Directory path to create; absolute or relative.
        mode: Permission bits handed verbatim to ``make_directory``.
        verbose: Report every attempt even when all of them succeed.
        make_directory: Primitive creating a single directory.
        separator: Path separator used to split ``path``.
        log: Logger receiving diagnostics. Defaults to the package logger.

    Returns:
        bool: True when every attempted segment was created or already existed.
    """

    report = attempt_segments(
        path,
        mode,
        make_directory=make_directory,
        separator=separator,
    )
    log_report(report, verbose=verbose, log=log)
    return report.succeeded


__all__ = [
    "SEGMENT_EVENT",
    "attempt_segment",
    "attempt_segments",
    "create_directories",
    "log_report",
]
