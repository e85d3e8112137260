"""Shared pytest fixtures for lockwarden tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from lockwarden.engines.lockfile_scanner.denylist import Denylist
from lockwarden.reporting import RecordingReporter


@pytest.fixture
def denylist() -> Denylist:
    return Denylist.from_table(
        {
            "ngx-toastr": "19.0.1,19.0.2",
            "@ctrl/tinycolor": "4.1.1, 4.1.2",
            "left-pad": "1.3.0",
        }
    )


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def write_lockfile(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON document (or raw text) to a lockfile and return its path."""

    def _write(content: dict[str, Any] | str, name: str = "package-lock.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
