"""Tests for the package list export."""

from __future__ import annotations

import pytest

from lockwarden.engines.lockfile_scanner.denylist import Denylist, default_denylist
from lockwarden.engines.lockfile_scanner.export import (
    LIST_HEADER,
    render_package_list,
    write_package_list,
)


class TestRenderPackageList:
    def test_one_line_per_version(self):
        dl = Denylist.from_table({"a": "1.0", "b": "2.0,2.1"})
        text = render_package_list(dl)
        lines = text.splitlines()

        assert lines[: len(LIST_HEADER)] == list(LIST_HEADER)
        assert lines[len(LIST_HEADER)] == ""
        assert lines[len(LIST_HEADER) + 1 :] == ["a@1.0", "b@2.0", "b@2.1"]
        assert text.endswith("b@2.1\n")

    def test_header_is_comment_block(self):
        assert all(line.startswith("# ") for line in LIST_HEADER)

    def test_builtin_line_count(self):
        dl = default_denylist()
        body = [
            line
            for line in render_package_list().splitlines()
            if line and not line.startswith("#")
        ]
        assert len(body) == sum(len(v) for v in dl.values())
        assert "ngx-toastr@19.0.1" in body


class TestWritePackageList:
    def test_writes_file(self, tmp_path):
        target = write_package_list(tmp_path / "list.txt", Denylist.from_table({"a": "1.0"}))
        assert target.read_text(encoding="utf-8").splitlines()[-1] == "a@1.0"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OSError):
            write_package_list(tmp_path / "missing" / "list.txt")
