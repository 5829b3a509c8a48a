"""Tests for the background comparison workers."""

from __future__ import annotations

import time

import pytest

from textdiff.core.models import CompareOptions, DiffMode
from textdiff.services.diff_cache import DiffCache
from textdiff.workers.base_worker import WorkerState, WorkerThread
from textdiff.workers.compare_worker import (
    FileDiffWorker,
    InputTooLargeError,
    TextDiffWorker,
    check_input_size,
)

pytestmark = pytest.mark.usefixtures("qapp")


def _collect(worker):
    events = {"finished": [], "error": [], "cancelled": 0, "progress": []}
    worker.signals.finished.connect(events["finished"].append)
    worker.signals.error.connect(lambda kind, msg: events["error"].append((kind, msg)))

    def on_cancelled():
        events["cancelled"] += 1

    worker.signals.cancelled.connect(on_cancelled)
    worker.signals.progress.connect(lambda cur, total, msg: events["progress"].append(cur))
    return events


def test_text_worker_completes() -> None:
    worker = TextDiffWorker("a\nb\nc", "a\nx\nc", left_label="old", right_label="new")
    events = _collect(worker)

    worker.run()

    assert worker.state == WorkerState.COMPLETED
    assert events["finished"] == [worker.result]
    assert events["progress"] == [0, 1, 2, 3]
    result = worker.result
    assert result.left_label == "old"
    assert result.statistics.additions == 1
    assert result.statistics.deletions == 1


def test_text_worker_word_mode_with_options() -> None:
    worker = TextDiffWorker(
        "Foo bar", "foo bar", mode=DiffMode.WORDS, options=CompareOptions(ignore_case=True)
    )
    worker.run()
    assert worker.result.is_identical
    assert worker.result.mode == DiffMode.WORDS


def test_empty_texts() -> None:
    worker = TextDiffWorker("", "")
    worker.run()
    assert worker.result.records == ()


def test_cancel_before_run() -> None:
    worker = TextDiffWorker("a", "b")
    events = _collect(worker)

    worker.cancel()
    worker.run()

    assert worker.state == WorkerState.CANCELLED
    assert events["cancelled"] == 1
    assert events["finished"] == []
    assert worker.result is None


def test_cancel_while_aligning_discards_result() -> None:
    worker = TextDiffWorker("a\nb", "b\nc")
    events = _collect(worker)

    def cancel_on_align(current, total, message):
        if current == 1:
            worker.cancel()

    worker.signals.progress.connect(cancel_on_align)
    worker.run()

    assert worker.state == WorkerState.CANCELLED
    assert events["cancelled"] == 1
    assert events["finished"] == []
    assert worker.result is None


def test_size_guard_fails_worker() -> None:
    worker = TextDiffWorker("1\n2\n3", "1", max_tokens=2, left_label="big.txt")
    events = _collect(worker)

    worker.run()

    assert worker.state == WorkerState.FAILED
    assert worker.error[0] == "InputTooLargeError"
    assert "big.txt" in worker.error[1]
    assert events["error"] == [worker.error]


def test_size_guard_can_be_disabled() -> None:
    check_input_size(["x"] * 10, "left", 0)
    with pytest.raises(InputTooLargeError) as excinfo:
        check_input_size(["x"] * 10, "left", 9)
    assert excinfo.value.token_count == 10
    assert isinstance(excinfo.value, ValueError)


def test_worker_uses_cache() -> None:
    cache = DiffCache()
    first = TextDiffWorker("a", "b", cache=cache)
    first.run()
    second = TextDiffWorker("a", "b", cache=cache)
    second.run()

    assert second.result.records is first.result.records
    assert cache.hits == 1


def test_cached_result_is_relabelled() -> None:
    cache = DiffCache()
    first = TextDiffWorker("a", "b", left_label="first.txt", cache=cache)
    first.run()
    second = TextDiffWorker("a", "b", left_label="second.txt", cache=cache)
    second.run()

    assert cache.hits == 1
    assert first.result.left_label == "first.txt"
    assert second.result.left_label == "second.txt"


def test_file_worker_normalizes_line_endings(write_text) -> None:
    left = write_text("left.txt", "one\r\ntwo\r\n")
    right = write_text("right.txt", "one\ntwo\n")

    worker = FileDiffWorker(left, right)
    worker.run()

    assert worker.state == WorkerState.COMPLETED
    assert worker.result.is_identical
    assert worker.result.left_label == str(left)


def test_file_worker_rejects_binary(tmp_path, write_text) -> None:
    binary = tmp_path / "blob.bin"
    binary.write_bytes(b"\x00\x01\x02")
    text = write_text("text.txt", "hello")

    worker = FileDiffWorker(binary, text)
    worker.run()

    assert worker.state == WorkerState.FAILED
    assert worker.error[0] == "OSError"
    assert "binary" in worker.error[1]


def test_file_worker_missing_file(tmp_path, write_text) -> None:
    worker = FileDiffWorker(write_text("a.txt", "a"), tmp_path / "missing.txt")
    worker.run()
    assert worker.state == WorkerState.FAILED
    assert "right" in worker.error[1]


def test_worker_thread_runs_in_background(qapp) -> None:
    worker = TextDiffWorker("a\nb", "a\nc")
    thread = WorkerThread(worker)
    thread.start()

    deadline = time.monotonic() + 5
    while not thread.isFinished() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    thread.wait(1000)

    assert thread.isFinished()
    assert thread.error is None
    assert thread.result.statistics.total == 3
