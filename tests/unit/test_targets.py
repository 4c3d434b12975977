"""Unit tests for the buffer, file and console targets."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from sinkline.core.dispatcher import Dispatcher
from sinkline.errors import InvalidSinkConfigError
from sinkline.models.levels import RenderFlags, Severity
from sinkline.sinks import buffer_sink, console_sink, file_sink
from sinkline.targets import BufferTarget, ConsoleTarget, FileTarget, SinkTarget

TEST_MESSAGE = "This is a test"


# ---------------------------------------------------------------------------
# Test: BufferTarget
# ---------------------------------------------------------------------------


class TestBufferTarget:
    @pytest.fixture
    def log(self, dispatcher: Dispatcher):
        sink = buffer_sink("Logger", Severity.TRACE)
        dispatcher.add_sink(sink)
        return dispatcher, sink.target

    def test_satisfies_protocol(self):
        assert isinstance(BufferTarget(), SinkTarget)

    def test_clear(self, log):
        dispatcher, target = log
        dispatcher.debug("Test")
        assert "Test" in target.getvalue()
        target.clear()
        assert target.getvalue() == ""
        dispatcher.debug("Test")
        assert target.getvalue() == "[D] Test\n"

    def test_get_lines(self, log):
        dispatcher, target = log
        assert target.get_lines() == []
        dispatcher.debug("Test")
        assert target.get_lines() == ["[D] Test"]
        dispatcher.debug("Test")
        assert len(target.get_lines()) == 2
        target.clear()
        assert target.get_lines() == []
        dispatcher.debug("Test")
        target.keep_last(0)
        assert target.get_lines() == []

    def test_keep_last_truncates(self, log):
        dispatcher, target = log
        lines_to_keep = 10
        for logged in range(15):
            dispatcher.debug(f"line {logged}")
            assert len(target.get_lines()) == min(logged + 1, lines_to_keep + 1)
            target.keep_last(lines_to_keep)
            assert len(target.get_lines()) == min(logged + 1, lines_to_keep)

        assert target.get_lines()[0] == "[D] line 5"
        assert target.get_lines()[-1] == "[D] line 14"

    def test_keep_last_default_and_negative(self):
        target = BufferTarget()
        for i in range(60):
            target.write(f"{i}\n", Severity.INFO)
        target.keep_last()
        assert len(target.get_lines()) == 50
        with pytest.raises(ValueError):
            target.keep_last(-1)

    def test_appends_to_supplied_buffer(self):
        existing = io.StringIO()
        existing.write("previous\n")
        sink = buffer_sink("shared", Severity.INFO, buffer=existing)
        with Dispatcher() as dispatcher:
            dispatcher.add_sink(sink)
            dispatcher.info("next")
        assert existing.getvalue() == "previous\n[I] next\n"

    def test_write_after_close_rejected(self):
        target = BufferTarget()
        target.write("before\n", Severity.INFO)
        target.close()
        with pytest.raises(ValueError):
            target.write("after\n", Severity.INFO)
        assert target.get_lines() == ["before"]

    def test_text_readable_after_close(self):
        sink = buffer_sink("mem", Severity.INFO)
        target = sink.target
        with Dispatcher() as dispatcher:
            dispatcher.add_sink(sink)
            dispatcher.info("kept")
        assert target.closed
        assert target.get_lines() == ["[I] kept"]


# ---------------------------------------------------------------------------
# Test: FileTarget
# ---------------------------------------------------------------------------


class TestFileTarget:
    @pytest.fixture
    def log_path(self, tmp_path: Path) -> Path:
        return tmp_path / "logs" / "log_test.txt"

    def test_create_append_replace(self, log_path: Path, dispatcher: Dispatcher):
        sink = file_sink("Logger", log_path, Severity.TRACE, replace=False)
        dispatcher.add_sink(sink)
        dispatcher.debug(TEST_MESSAGE)
        dispatcher.flush_all()
        dispatcher.remove_sink(sink)
        size = log_path.stat().st_size
        assert size >= len(TEST_MESSAGE)

        # Appending leaves existing content in place.
        file_sink("Logger", log_path, Severity.TRACE, replace=False).close()
        assert log_path.stat().st_size == size

        # Replacing truncates.
        file_sink("Logger", log_path, Severity.TRACE, replace=True).close()
        assert log_path.exists()
        assert log_path.stat().st_size == 0

    def test_append_accumulates_lines(self, log_path: Path):
        for message in ("first", "second"):
            with Dispatcher() as dispatcher:
                dispatcher.add_sink(file_sink("f", log_path, Severity.INFO))
                dispatcher.info(message)
        assert log_path.read_text(encoding="utf-8") == "[I] first\n[I] second\n"

    def test_flushed_on_remove(self, log_path: Path, dispatcher: Dispatcher):
        sink = file_sink("Logger", log_path, Severity.TRACE, buffer_size=1 << 16)
        dispatcher.add_sink(sink)
        dispatcher.debug(TEST_MESSAGE)
        dispatcher.remove_sink(sink)
        assert log_path.read_text(encoding="utf-8") == f"[D] {TEST_MESSAGE}\n"
        assert sink.target is None

    @pytest.mark.parametrize("buffer_size", [0, -1])
    def test_invalid_buffer_size(self, log_path: Path, buffer_size: int):
        with pytest.raises(InvalidSinkConfigError):
            file_sink("Logger", log_path, Severity.TRACE, buffer_size=buffer_size)
        assert not log_path.exists()

    def test_close_writes_pending_data(self, log_path: Path):
        target = FileTarget(log_path, buffer_size=1 << 16)
        target.write("pending\n", Severity.INFO)
        target.close()
        assert target.closed
        assert log_path.read_text(encoding="utf-8") == "pending\n"

    def test_target_close_is_idempotent(self, log_path: Path):
        target = FileTarget(log_path)
        target.close()
        target.close()
        assert target.closed

    def test_file_flag_set(self, log_path: Path):
        with file_sink("f", log_path, Severity.INFO) as sink:
            assert sink.flags.backed_by_file


# ---------------------------------------------------------------------------
# Test: ConsoleTarget
# ---------------------------------------------------------------------------


class TestConsoleTarget:
    @pytest.fixture
    def log(self, dispatcher: Dispatcher) -> Dispatcher:
        dispatcher.add_sink(console_sink("Logger", Severity.TRACE))
        return dispatcher

    @pytest.mark.parametrize("level", ["warning", "info", "debug", "trace"])
    def test_non_errors_go_to_stdout(self, log: Dispatcher, capsys, level: str):
        log.log(TEST_MESSAGE, level)
        captured = capsys.readouterr()
        assert TEST_MESSAGE in captured.out
        assert captured.err == ""

    def test_errors_go_to_stderr(self, log: Dispatcher, capsys):
        log.error(TEST_MESSAGE)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == f"[E] {TEST_MESSAGE}\n"

    def test_long_lines_are_not_wrapped(self, log: Dispatcher, capsys):
        message = "x" * 500
        log.info(message)
        assert capsys.readouterr().out == f"[I] {message}\n"

    def test_brackets_are_not_treated_as_markup(self, log: Dispatcher, capsys):
        log.info("[bold]not markup[/bold]")
        assert capsys.readouterr().out == "[I] [bold]not markup[/bold]\n"

    def test_styled_output_keeps_text(self, dispatcher: Dispatcher, capsys):
        dispatcher.add_sink(console_sink("styled", Severity.TRACE, styled=True))
        dispatcher.warning("careful")
        assert "[W] careful" in capsys.readouterr().out

    def test_close_does_not_close_process_streams(self, capsys):
        target = ConsoleTarget()
        target.close()
        print("still open")
        assert "still open" in capsys.readouterr().out

    def test_flags_passed_through(self, dispatcher: Dispatcher, capsys):
        dispatcher.add_sink(console_sink("ts", Severity.INFO, flags=RenderFlags(timestamp=True)))
        dispatcher.info("stamped")
        assert capsys.readouterr().out == "[" + " " * 11 + "0s.000 ][I] stamped\n"
