"""
Summary: Exercise the segment-by-segment directory creation use case.
Why: Attempt order, already-exists tolerance and diagnostics must stay stable.
"""

from __future__ import annotations

import errno
import logging
from pathlib import Path

import pytest

from portafs.features.filesystem.usecases.create_directories import (
    SEGMENT_EVENT,
    attempt_segments,
    create_directories,
)


class RecordingMaker:
    """Fake single-directory primitive that records calls and scripted errors."""

    def __init__(self, errors: dict[str, int] | None = None) -> None:
        self.calls: list[tuple[str, int]] = []
        self.errors = errors or {}

    def __call__(self, path: str, mode: int, /) -> None:
        self.calls.append((path, mode))
        code = self.errors.get(path)
        if code is not None:
            raise OSError(code, "scripted failure", path)

    @property
    def paths(self) -> list[str]:
        return [path for path, _ in self.calls]


def _segment_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if getattr(r, "fs_event", None) == SEGMENT_EVENT]


def test_single_name_is_attempted_once() -> None:
    maker = RecordingMaker()

    assert create_directories("out", 0o700, make_directory=maker)
    assert maker.calls == [("out", 0o700)]


def test_single_name_failure_fails() -> None:
    maker = RecordingMaker({"out": errno.ENOSPC})

    assert not create_directories("out", make_directory=maker)
    assert maker.paths == ["out"]


def test_absolute_path_attempts_each_ancestor_in_order() -> None:
    maker = RecordingMaker()

    assert create_directories("/a/b/c", make_directory=maker)
    assert maker.paths == ["/a", "/a/b", "/a/b/c"]


def test_relative_path_attempts_each_ancestor_in_order() -> None:
    maker = RecordingMaker()

    assert create_directories("a/b/c", make_directory=maker)
    assert maker.paths == ["a", "a/b", "a/b/c"]


def test_already_exists_is_not_a_failure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="portafs")
    maker = RecordingMaker({"/a": errno.EEXIST, "/a/b": errno.EEXIST})

    assert create_directories("/a/b/c", make_directory=maker)
    assert _segment_records(caplog) == []


@pytest.mark.parametrize("path", ["", "/"])
@pytest.mark.parametrize("verbose", [False, True])
def test_empty_and_root_paths_do_nothing(
    path: str, verbose: bool, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="portafs")
    maker = RecordingMaker()

    assert create_directories(path, verbose=verbose, make_directory=maker)
    assert maker.calls == []
    assert caplog.records == []


def test_failed_segment_does_not_stop_the_walk() -> None:
    """Later segments are still attempted and the overall result fails."""

    maker = RecordingMaker({"a": errno.EACCES})

    report = attempt_segments("a/b/c", make_directory=maker)

    assert maker.paths == ["a", "a/b", "a/b/c"]
    assert not report.succeeded
    assert [attempt.path for attempt in report.failures] == ["a"]


def test_middle_failure_fails_even_when_leaf_succeeds() -> None:
    maker = RecordingMaker({"/a/b": errno.EROFS})

    assert not create_directories("/a/b/c", make_directory=maker)


def test_failure_emits_diagnostics_without_verbose(caplog: pytest.LogCaptureFixture) -> None:
    """A failing call reports every attempted segment even with verbose off."""

    caplog.set_level(logging.INFO, logger="portafs")
    maker = RecordingMaker({"/a": errno.EACCES, "/a/b": errno.ENOENT})

    assert not create_directories("/a/b", verbose=False, make_directory=maker)

    records = _segment_records(caplog)
    assert [r.segment_path for r in records] == ["/a", "/a/b"]
    assert all(r.levelno == logging.ERROR for r in records)
    assert "create_directories: path errno: /a :: " in records[0].getMessage()
    assert records[0].error_code == errno.EACCES


def test_verbose_success_reports_each_segment(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="portafs")
    maker = RecordingMaker({"a": errno.EEXIST})

    assert create_directories("a/b", verbose=True, make_directory=maker)

    records = _segment_records(caplog)
    assert [r.segment_path for r in records] == ["a", "a/b"]
    assert all(r.levelno == logging.INFO for r in records)
    assert all(r.segment_ok for r in records)


def test_success_without_verbose_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="portafs")

    assert create_directories("a/b", make_directory=RecordingMaker())
    assert _segment_records(caplog) == []


def test_creates_real_directories_idempotently(tmp_path: Path) -> None:
    target = tmp_path / "x" / "y" / "z"

    assert create_directories(str(target))
    assert target.is_dir()
    assert create_directories(str(target))


def test_relative_path_against_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    assert create_directories("rel/nested/")
    assert (tmp_path / "rel" / "nested").is_dir()


def test_unrepresentable_name_is_recorded_as_einval() -> None:
    def reject(path: str, mode: int) -> None:
        raise ValueError("embedded null byte")

    report = attempt_segments("bad\0name/x", make_directory=reject)

    assert not report.succeeded
    assert [attempt.error_code for attempt in report.attempts] == [errno.EINVAL, errno.EINVAL]
