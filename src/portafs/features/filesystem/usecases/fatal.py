"""Fatal-error handlers used by operations that cannot report failure by value."""

from __future__ import annotations

import logging
import os
from typing import NoReturn

from portafs.platform.logging import logger

from ..domain.models import FatalFileSystemError

FATAL_EVENT = "filesystem.fatal"


def raise_fatal(message: str) -> NoReturn:
    """Default handler: raise ``FatalFileSystemError`` and let the host decide."""

    raise FatalFileSystemError(message)


def abort_process(message: str) -> NoReturn:
    """Log ``message`` and terminate the process immediately."""

    logger.log(logging.CRITICAL, "%s", message, extra={"fs_event": FATAL_EVENT})
    for handler in logger.handlers:
        handler.flush()
    os.abort()


__all__ = ["FATAL_EVENT", "abort_process", "raise_fatal"]
