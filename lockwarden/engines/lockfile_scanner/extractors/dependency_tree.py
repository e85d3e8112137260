"""Extractor for the nested ``dependencies`` tree (lockfileVersion 1).

The raw tree is first decoded into :data:`ManifestNode` values so the walk
only has to follow one rule: emit every :class:`VersionedNode`, always descend
into children. Malformed sub-trees are dropped during decoding; their siblings
and ancestors are kept.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from lockwarden.core.logging import get_logger
from lockwarden.engines.lockfile_scanner.extractors.packages_table import coerce_version
from lockwarden.engines.lockfile_scanner.models import (
    ManifestNode,
    ResolvedPackage,
    UnversionedNode,
    VersionedNode,
)
from lockwarden.engines.lockfile_scanner.registry import register_extractor
from lockwarden.exceptions import PartialExtractionError

log = get_logger("lockwarden.extract")


def decode_node(name: str, raw: Any, path: list[str] | None = None) -> ManifestNode:
    """Decode one tree entry.

    Raises :class:`PartialExtractionError` if the entry is not an object.
    An unusable version is logged and the entry is kept as unversioned, so
    its children are still walked. Malformed descendants are logged and skipped.
    """
    path = [*(path or []), name]
    if not isinstance(raw, Mapping):
        raise PartialExtractionError(path, f"expected an object, got {type(raw).__name__}")

    raw_version = raw.get("version")
    version = coerce_version(raw_version)
    if version is None and raw_version not in (None, ""):
        _log_partial(PartialExtractionError(path, f"unusable version {raw_version!r}"))

    children = decode_children(raw.get("dependencies"), path)
    if version is None:
        return UnversionedNode(name=name, children=children)
    return VersionedNode(name=name, version=version, children=children)


def decode_children(raw: Any, path: list[str]) -> tuple[ManifestNode, ...]:
    """Decode a ``dependencies`` mapping, skipping entries that fail to decode."""
    if raw is None:
        return ()
    if not isinstance(raw, Mapping):
        _log_partial(PartialExtractionError(path, "'dependencies' is not an object"))
        return ()

    nodes: list[ManifestNode] = []
    for child_name, child_raw in raw.items():
        # null entries carry nothing
        if child_raw is None:
            continue
        try:
            nodes.append(decode_node(child_name, child_raw, path))
        except PartialExtractionError as exc:
            _log_partial(exc)
        except RecursionError:
            _log_partial(PartialExtractionError([*path, child_name], "tree too deep"))
    return tuple(nodes)


def walk(nodes: tuple[ManifestNode, ...]) -> Iterator[ResolvedPackage]:
    """Yield a pair for every versioned node, depth-first."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, VersionedNode):
            yield ResolvedPackage(name=node.name, version=node.version)
        stack.extend(reversed(node.children))


def _log_partial(exc: PartialExtractionError) -> None:
    log.debug("extract.partial_error", path=exc.path, reason=exc.reason)


class DependencyTreeExtractor:
    schema = "dependency-tree"
    top_level_key = "dependencies"

    def extract(self, document: Mapping[str, Any]) -> set[ResolvedPackage]:
        raw = document.get(self.top_level_key)
        if not isinstance(raw, Mapping):
            return set()
        return set(walk(decode_children(raw, [])))


register_extractor(DependencyTreeExtractor())
