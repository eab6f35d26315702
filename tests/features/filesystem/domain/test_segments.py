"""
Summary: Validate the ancestor prefixes produced for absolute and relative paths.
Why: The directory walk must attempt each ancestor once, root to leaf.
"""

from __future__ import annotations

import pytest

from portafs.features.filesystem.domain.segments import segment_prefixes


@pytest.mark.parametrize("path", ["", "/"])
def test_empty_and_root_paths_need_no_attempts(path: str) -> None:
    """Nothing is attempted for the empty path or the lone separator."""

    assert segment_prefixes(path) == []


def test_path_without_separator_is_single_attempt() -> None:
    """A bare name is attempted exactly once."""

    assert segment_prefixes("data") == ["data"]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/a", ["/a"]),
        ("/a/b/c", ["/a", "/a/b", "/a/b/c"]),
        ("/a/b/", ["/a", "/a/b"]),
        ("//a", ["/", "//a"]),
    ],
)
def test_absolute_paths_skip_root(path: str, expected: list[str]) -> None:
    """Absolute walks skip the root and stop at a trailing separator."""

    assert segment_prefixes(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a/b/c", ["a", "a/b", "a/b/c"]),
        ("a/b/", ["a", "a/b", "a/b/"]),
        ("a//b", ["a", "a/", "a//b"]),
        ("./out", [".", "./out"]),
    ],
)
def test_relative_paths_end_with_full_path(path: str, expected: list[str]) -> None:
    """Relative walks always finish with one attempt on the full path."""

    assert segment_prefixes(path) == expected


def test_custom_separator() -> None:
    """The separator is configurable for hosts with other conventions."""

    assert segment_prefixes("a\\b\\c", "\\") == ["a", "a\\b", "a\\b\\c"]
    assert segment_prefixes("a/b", "\\") == ["a/b"]
