"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for diagnostics.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import DiagnosticRichHandler

__all__ = [
    "DiagnosticRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
