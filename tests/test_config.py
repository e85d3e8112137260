"""Tests for ScanConfig."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from lockwarden.config import ScanConfig

_KEYS = ("LOCKWARDEN_MANIFEST", "LOCKWARDEN_VERBOSE", "LOCKWARDEN_OUTPUT")


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=False):
        for key in _KEYS:
            os.environ.pop(key, None)
        yield


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.manifest_path == Path("package-lock.json")
        assert config.verbose is False
        assert config.output_file is None

    def test_from_env_defaults(self, clean_env):
        assert ScanConfig.from_env() == ScanConfig()

    def test_from_env(self, clean_env):
        env = {
            "LOCKWARDEN_MANIFEST": "app/package-lock.json",
            "LOCKWARDEN_VERBOSE": "Yes",
            "LOCKWARDEN_OUTPUT": "scan.log",
        }
        with patch.dict(os.environ, env):
            config = ScanConfig.from_env()
        assert config.manifest_path == Path("app/package-lock.json")
        assert config.verbose is True
        assert config.output_file == Path("scan.log")

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_verbose_falsy(self, clean_env, raw):
        with patch.dict(os.environ, {"LOCKWARDEN_VERBOSE": raw}):
            assert ScanConfig.from_env().verbose is False

    def test_with_overrides_ignores_none(self):
        base = ScanConfig(manifest_path=Path("a.json"), verbose=True)
        assert base.with_overrides() == base
        changed = base.with_overrides(manifest_path="b.json", output_file="o.txt")
        assert changed.manifest_path == Path("b.json")
        assert changed.output_file == Path("o.txt")
        assert changed.verbose is True

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ScanConfig().verbose = True  # type: ignore[misc]
