"""Extractor registry — every registered pass runs on every document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from lockwarden.engines.lockfile_scanner.document import load_document
from lockwarden.engines.lockfile_scanner.models import ResolvedPackage


@runtime_checkable
class LockfileExtractor(Protocol):
    """Interface that every extraction pass must satisfy."""

    schema: str
    top_level_key: str

    def extract(self, document: Mapping[str, Any]) -> set[ResolvedPackage]: ...


EXTRACTOR_REGISTRY: dict[str, LockfileExtractor] = {}


def register_extractor(extractor: LockfileExtractor) -> None:
    """Register an extractor instance by its schema name."""
    EXTRACTOR_REGISTRY[extractor.schema] = extractor


def sort_packages(packages: set[ResolvedPackage]) -> list[ResolvedPackage]:
    """Deterministic order: lexicographic on the ``name@version`` string."""
    return sorted(packages, key=lambda p: p.spec)


def extract_packages(document: Mapping[str, Any] | bytes | str) -> list[ResolvedPackage]:
    """Run all extraction passes and return the union, deduplicated and sorted.

    Passes are not chosen by lockfile version: a document carrying both a
    ``packages`` table and a ``dependencies`` tree contributes pairs from both.
    """
    if isinstance(document, (bytes, str)):
        document = load_document(document)

    found: set[ResolvedPackage] = set()
    for extractor in EXTRACTOR_REGISTRY.values():
        found |= extractor.extract(document)
    return sort_packages(found)
