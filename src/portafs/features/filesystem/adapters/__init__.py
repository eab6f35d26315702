"""Backends implementing ``FileSystemPort``."""

from .manual import ManualFileSystem
from .native import NativeFileSystem

__all__ = ["ManualFileSystem", "NativeFileSystem"]
