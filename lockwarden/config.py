"""Scan configuration — passed explicitly to every scan."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_MANIFEST = "package-lock.json"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ScanConfig:
    """Per-scan settings.

    Environment overrides (see :meth:`from_env`):
        LOCKWARDEN_MANIFEST — lockfile path (default: package-lock.json)
        LOCKWARDEN_VERBOSE  — 1/true/yes/on enables verbose events
        LOCKWARDEN_OUTPUT   — also write events to this file
    """

    manifest_path: Path = Path(DEFAULT_MANIFEST)
    verbose: bool = False
    output_file: Path | None = None

    @classmethod
    def from_env(cls) -> ScanConfig:
        output = os.environ.get("LOCKWARDEN_OUTPUT")
        return cls(
            manifest_path=Path(os.environ.get("LOCKWARDEN_MANIFEST", DEFAULT_MANIFEST)),
            verbose=_env_bool("LOCKWARDEN_VERBOSE", False),
            output_file=Path(output) if output else None,
        )

    def with_overrides(
        self,
        *,
        manifest_path: str | Path | None = None,
        verbose: bool | None = None,
        output_file: str | Path | None = None,
    ) -> ScanConfig:
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {}
        if manifest_path is not None:
            changes["manifest_path"] = Path(manifest_path)
        if verbose is not None:
            changes["verbose"] = verbose
        if output_file is not None:
            changes["output_file"] = Path(output_file)
        return replace(self, **changes)
