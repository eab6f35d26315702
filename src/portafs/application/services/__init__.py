"""Application services."""

from .filesystem_service import FileSystemService, get_filesystem, resolve_backend

__all__ = ["FileSystemService", "get_filesystem", "resolve_backend"]
