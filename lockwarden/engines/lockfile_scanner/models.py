"""Data models for the lockfile scanner engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ResolvedPackage:
    """A concrete ``(name, version)`` pair recorded in a lockfile."""

    name: str
    version: str

    @property
    def spec(self) -> str:
        return f"{self.name}@{self.version}"

    def __str__(self) -> str:
        return self.spec


# ── dependency tree nodes ────────────────────────────────────────────────


@dataclass(frozen=True)
class VersionedNode:
    """A tree entry that records a resolved version."""

    name: str
    version: str
    children: tuple[ManifestNode, ...] = ()


@dataclass(frozen=True)
class UnversionedNode:
    """A tree entry without a version; only its children can contribute pairs."""

    name: str
    children: tuple[ManifestNode, ...] = ()


ManifestNode = Union[VersionedNode, UnversionedNode]


# ── verdict ──────────────────────────────────────────────────────────────


class ScanStatus(str, enum.Enum):
    CLEAN = "clean"
    THREATS_FOUND = "threats_found"
    ERROR = "error"

    @property
    def exit_code(self) -> int:
        return 0 if self is ScanStatus.CLEAN else 1


@dataclass(frozen=True)
class ScanVerdict:
    """Outcome of one scan invocation."""

    status: ScanStatus
    total_checked: int = 0
    malicious_found: tuple[ResolvedPackage, ...] = ()
    manifest_path: str | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return self.status.exit_code

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "manifest_path": self.manifest_path,
            "total_checked": self.total_checked,
            "malicious_found": [
                {"name": p.name, "version": p.version} for p in self.malicious_found
            ],
            "error": self.error,
            "exit_code": self.exit_code,
        }

