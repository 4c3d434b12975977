"""Integration tests — many threads logging through one dispatcher.

Every accepted call must land on every sink as one whole line: no lost
lines, no torn or interleaved headers, same content on every sink.
"""

from __future__ import annotations

import re
import threading
from collections import Counter
from pathlib import Path

import pytest

from sinkline.core.dispatcher import Dispatcher
from sinkline.models.levels import RenderFlags, Severity
from sinkline.sinks import buffer_sink, file_sink

THREADS = 10
CALLS_PER_THREAD = 10_000

LINE_RE = re.compile(
    r"^\[ (?: {5}|\s*\d+d) \s*\d+s\.\d{3} \]\[@(?P<thread>worker-\d+)\]\[I\] "
    r"message (?P<index>\d+)$"
)


def _run_workers(dispatcher: Dispatcher) -> None:
    start = threading.Barrier(THREADS)

    def work() -> None:
        start.wait()
        for index in range(CALLS_PER_THREAD):
            dispatcher.info(f"message {index}")

    workers = [
        threading.Thread(target=work, name=f"worker-{n}") for n in range(THREADS)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


class TestConcurrentLogging:
    @pytest.fixture
    def log_path(self, tmp_path: Path) -> Path:
        return tmp_path / "concurrent.log"

    def test_every_line_is_whole_and_counted(self, log_path: Path):
        flags = RenderFlags(timestamp=True)
        memory = buffer_sink("memory", Severity.INFO, flags=flags)
        with Dispatcher() as dispatcher:
            dispatcher.add_sink(memory)
            dispatcher.add_sink(file_sink("file", log_path, Severity.INFO, replace=True, flags=flags))
            _run_workers(dispatcher)

        file_lines = log_path.read_text(encoding="utf-8").splitlines()
        memory_lines = memory.target.get_lines()

        assert len(file_lines) == THREADS * CALLS_PER_THREAD
        assert file_lines == memory_lines

        per_thread: Counter[str] = Counter()
        last_index: dict[str, int] = {}
        for line in file_lines:
            match = LINE_RE.match(line)
            assert match, f"malformed line: {line!r}"
            thread = match.group("thread")
            index = int(match.group("index"))
            # Calls from one thread keep their order.
            assert index == last_index.get(thread, -1) + 1
            last_index[thread] = index
            per_thread[thread] += 1

        assert per_thread == {f"worker-{n}": CALLS_PER_THREAD for n in range(THREADS)}

    def test_filtered_sink_sees_nothing(self):
        quiet = buffer_sink("quiet", Severity.ERROR)
        with Dispatcher() as dispatcher:
            dispatcher.add_sink(quiet)
            _run_workers(dispatcher)
        assert quiet.target.get_lines() == []
