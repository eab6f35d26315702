"""
Summary: Split a directory path into the ancestor prefixes that must exist.
Why: Keep the segment walk pure so it can be checked without touching disk.
"""

from __future__ import annotations

from .models import DEFAULT_SEPARATOR


def segment_prefixes(path: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Return every ancestor of ``path`` to create, in root-to-leaf order.

    Args:
        path: Directory path, absolute or relative. Not normalized.
        separator: Single-character path separator.

    Returns:
        list[str]: Prefixes to attempt. Empty for ``""`` and for the lone
        separator. Absolute paths never include the root itself, and a
        trailing separator does not produce an extra empty leaf. Relative
        paths always end with the full path, trailing separator included.
    """

    if not path or path == separator:
        return []

    if separator not in path:
        return [path]

    prefixes: list[str] = []

    if path.startswith(separator):
        index = 0
        while index + 1 < len(path):
            next_index = path.find(separator, index + 1)
            if next_index == -1:
                prefixes.append(path)
                break
            prefixes.append(path[:next_index])
            index = next_index
        return prefixes

    index = path.find(separator)
    while index != -1:
        prefixes.append(path[:index])
        index = path.find(separator, index + 1)
    prefixes.append(path)
    return prefixes


__all__ = ["segment_prefixes"]
