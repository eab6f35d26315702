"""Native filesystem backend delegating to ``os`` and ``shutil``."""

from __future__ import annotations

import errno
import os
import shutil
from typing import final

from portafs.platform.logging import logger

from ..domain.models import FileSystemSettings, PathArg
from ..usecases.create_directories import SEGMENT_EVENT
from ..usecases.fatal import raise_fatal
from ..usecases.ports import FatalErrorHandler, FileSystemPort
from ._common import describe_error, log_exists_failure, remove_entry


@final
class NativeFileSystem(FileSystemPort):
    """Thin wrapper around the host's hierarchical filesystem facilities."""

    def __init__(
        self,
        settings: FileSystemSettings | None = None,
        *,
        on_fatal: FatalErrorHandler = raise_fatal,
    ) -> None:
        self.settings = settings or FileSystemSettings()
        self._on_fatal = on_fatal

    def create_directories(
        self,
        path: PathArg,
        mode: int | None = None,
        verbose: bool = False,
    ) -> bool:
        raw_path = os.fspath(path)
        if not raw_path or raw_path in {os.sep, self.settings.separator}:
            return True

        try:
            os.makedirs(
                raw_path,
                self.settings.directory_mode if mode is None else mode,
                exist_ok=True,
            )
        except (OSError, ValueError) as exc:
            if verbose:
                reason = describe_error(exc)
                logger.error(
                    "create_directories: failed to create %s: %s",
                    raw_path,
                    reason,
                    extra={
                        "fs_event": SEGMENT_EVENT,
                        "segment_path": raw_path,
                        "error_code": getattr(exc, "errno", None) or errno.EINVAL,
                        "segment_ok": False,
                        "reason": reason,
                    },
                )
            return False
        return True

    def exists(self, path: PathArg) -> bool:
        try:
            _ = os.stat(path)
        except (OSError, ValueError) as exc:
            log_exists_failure(path, exc, self.settings)
            return False
        return True

    def current_path(self) -> str:
        try:
            return os.getcwd()
        except OSError as exc:
            if self.settings.is_verbose:
                logger.info("current_path failed: %s", exc)
            self._on_fatal(f"getcwd failed: {exc.strerror or exc}")

    def remove(self, path: PathArg) -> bool:
        try:
            remove_entry(path)
        except (OSError, ValueError):
            return False
        return True

    def remove_all(self, path: PathArg) -> bool:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            return True
        except (OSError, ValueError):
            return False
        return True


__all__ = ["NativeFileSystem"]
