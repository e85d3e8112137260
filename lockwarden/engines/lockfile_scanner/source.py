"""Manifest sources — where lockfile bytes come from."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ManifestSource(Protocol):
    def exists(self, path: str) -> bool: ...

    def read_all(self, path: str) -> bytes: ...


class LocalManifestSource:
    """Reads manifests from the local filesystem.

    ``read_all`` lets :class:`OSError` propagate; the scanner maps it to a
    read failure.
    """

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read_all(self, path: str) -> bytes:
        return Path(path).read_bytes()
