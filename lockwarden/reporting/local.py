"""Local file reporter — append-only scan log."""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

import click

from lockwarden.reporting.base import EventLevel, Reporter


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


class FileReporter(Reporter):
    """Writes ``[timestamp] [LEVEL] message`` lines to *path*.

    The file is truncated on construction. Writes are serialized, so one
    instance may be shared by concurrent scans. A failed write is reported on
    stderr and does not interrupt the scan.
    """

    def __init__(self, path: str | Path, verbose: bool = False) -> None:
        self.path = Path(path)
        self.verbose = verbose
        self._lock = threading.Lock()
        # Raises OSError if the file cannot be created; callers decide.
        self.path.write_text("", encoding="utf-8")

    def emit(self, level: EventLevel, message: str) -> None:
        if level is EventLevel.VERBOSE and not self.verbose:
            return
        line = f"[{_timestamp()}] [{level.value}] {message}\n"
        with self._lock:
            try:
                with self.path.open("a", encoding="utf-8") as fh:
                    fh.write(line)
            except OSError as exc:
                click.echo(
                    click.style("[ERROR]", fg="red")
                    + f" Failed to write to output file {self.path}: {exc}",
                    err=True,
                )
