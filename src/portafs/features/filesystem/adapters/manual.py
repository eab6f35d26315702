"""Manual filesystem backend built on single-directory OS primitives."""

from __future__ import annotations

import os
import shutil
import stat
from typing import final

from portafs.platform.logging import logger

from ..domain.models import FileSystemSettings, PathArg
from ..usecases.create_directories import create_directories
from ..usecases.fatal import raise_fatal
from ..usecases.ports import FatalErrorHandler, FileSystemPort, MakeDirectoryPort
from ._common import describe_error, log_exists_failure, remove_entry


@final
class ManualFileSystem(FileSystemPort):
    """Walk paths segment by segment and escalate unrecoverable failures."""

    def __init__(
        self,
        settings: FileSystemSettings | None = None,
        *,
        make_directory: MakeDirectoryPort = os.mkdir,
        on_fatal: FatalErrorHandler = raise_fatal,
    ) -> None:
        self.settings = settings or FileSystemSettings()
        self._make_directory = make_directory
        self._on_fatal = on_fatal

    def create_directories(
        self,
        path: PathArg,
        mode: int | None = None,
        verbose: bool = False,
    ) -> bool:
        return create_directories(
            os.fspath(path),
            self.settings.directory_mode if mode is None else mode,
            verbose,
            make_directory=self._make_directory,
            separator=self.settings.separator,
            log=logger,
        )

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
            self._on_fatal(f"getcwd failed: {exc.strerror or exc}")

    def remove(self, path: PathArg) -> bool:
        try:
            remove_entry(path)
        except (OSError, ValueError):
            return False
        return True

    def remove_all(self, path: PathArg) -> bool:
        raw_path = os.fspath(path)
        limit = self.settings.remove_all_path_limit
        if limit is not None and len(raw_path) >= limit:
            self._on_fatal("remove_all: path name too long")
            return False

        try:
            mode = os.lstat(raw_path).st_mode
        except FileNotFoundError:
            return True
        except (OSError, ValueError) as exc:
            self._on_fatal(f"remove_all: removing {raw_path} failed: {describe_error(exc)}")
            return False

        try:
            if stat.S_ISDIR(mode):
                shutil.rmtree(raw_path)
            else:
                os.remove(raw_path)
        except OSError as exc:
            self._on_fatal(f"remove_all: removing {raw_path} failed: {describe_error(exc)}")
            return False
        return True


__all__ = ["ManualFileSystem"]
