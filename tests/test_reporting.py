"""Tests for reporters."""

from __future__ import annotations

import re
import threading
from unittest.mock import patch

from lockwarden.reporting import (
    ConsoleReporter,
    EventLevel,
    FileReporter,
    MultiReporter,
    RecordingReporter,
)

_LINE_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] \[(\w+)\] (.*)$")


def _read(reporter: FileReporter) -> str:
    return reporter.path.read_text(encoding="utf-8")


class TestConsoleReporter:
    def test_levels_routed_to_streams(self, capsys):
        reporter = ConsoleReporter(color=False)
        reporter.emit(EventLevel.INFO, "hello")
        reporter.emit(EventLevel.SUCCESS, "done")
        reporter.emit(EventLevel.WARNING, "careful")
        reporter.emit(EventLevel.ERROR, "boom")

        captured = capsys.readouterr()
        assert captured.out == "[INFO] hello\n[SUCCESS] done\n"
        assert captured.err == "[WARNING] careful\n[ERROR] boom\n"

    def test_verbose_hidden_by_default(self, capsys):
        ConsoleReporter(color=False).emit(EventLevel.VERBOSE, "detail")
        assert capsys.readouterr().out == ""

    def test_verbose_shown_when_enabled(self, capsys):
        ConsoleReporter(verbose=True, color=False).emit(EventLevel.VERBOSE, "detail")
        assert capsys.readouterr().out == "[VERBOSE] detail\n"


class TestFileReporter:
    def test_truncates_on_open(self, tmp_path):
        path = tmp_path / "out.log"
        path.write_text("stale\n")
        FileReporter(path)
        assert path.read_text() == ""

    def test_line_format(self, tmp_path):
        reporter = FileReporter(tmp_path / "out.log")
        reporter.emit(EventLevel.WARNING, "found one")
        lines = _read(reporter).splitlines()
        assert len(lines) == 1
        m = _LINE_RE.match(lines[0])
        assert m is not None
        assert m.groups() == ("WARNING", "found one")

    def test_verbose_filtering(self, tmp_path):
        quiet = FileReporter(tmp_path / "quiet.log")
        loud = FileReporter(tmp_path / "loud.log", verbose=True)
        for reporter in (quiet, loud):
            reporter.emit(EventLevel.VERBOSE, "Checking a@1")
        assert _read(quiet) == ""
        assert "[VERBOSE] Checking a@1" in _read(loud)

    def test_write_failure_does_not_raise(self, tmp_path, capsys):
        reporter = FileReporter(tmp_path / "out.log")
        with patch("pathlib.Path.open", side_effect=OSError("disk full")):
            reporter.emit(EventLevel.INFO, "lost")
        assert "Failed to write to output file" in capsys.readouterr().err

    def test_concurrent_writes_do_not_interleave(self, tmp_path):
        reporter = FileReporter(tmp_path / "out.log")

        def worker(n: int) -> None:
            for i in range(50):
                reporter.emit(EventLevel.INFO, f"worker-{n} line-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = _read(reporter).splitlines()
        assert len(lines) == 200
        assert all(_LINE_RE.match(line) for line in lines)


class TestMultiReporter:
    def test_fans_out_in_order(self):
        a, b = RecordingReporter(), RecordingReporter()
        MultiReporter(a, b).emit(EventLevel.ERROR, "x")
        assert a.events == b.events == [(EventLevel.ERROR, "x")]

    def test_close_propagates(self):
        closed = []

        class Closing(RecordingReporter):
            def close(self) -> None:
                closed.append(self)

        r1, r2 = Closing(), Closing()
        MultiReporter(r1, r2).close()
        assert closed == [r1, r2]


class TestRecordingReporter:
    def test_messages_by_level(self):
        r = RecordingReporter()
        r.emit(EventLevel.INFO, "a")
        r.emit(EventLevel.ERROR, "b")
        assert r.messages() == ["a", "b"]
        assert r.messages(EventLevel.ERROR) == ["b"]
