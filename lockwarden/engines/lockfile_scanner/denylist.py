"""Denylist — package name to the exact versions known to be compromised."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from lockwarden.engines.lockfile_scanner.known_compromised import MALICIOUS_PACKAGES

_EMPTY: frozenset[str] = frozenset()


def _clean_versions(parts: Iterable[str]) -> tuple[str, ...]:
    """Trim versions and drop empty or repeated ones.

    Order of first appearance is kept so exports stay stable.
    """
    seen: dict[str, None] = {}
    for part in parts:
        version = part.strip()
        if version:
            seen.setdefault(version, None)
    return tuple(seen)


class Denylist(Mapping[str, frozenset[str]]):
    """Immutable ``name -> frozenset(versions)`` table.

    Names are matched exactly and case-sensitively, ``@scope/`` included.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]]) -> None:
        table: dict[str, frozenset[str]] = {}
        ordered: dict[str, tuple[str, ...]] = {}
        for name, versions in entries.items():
            if not name:
                raise ValueError("denylist entry has an empty package name")
            if isinstance(versions, str):
                raise TypeError(
                    f"versions for {name!r} must be an iterable of strings; "
                    "use Denylist.from_table for comma-separated values"
                )
            parsed = _clean_versions(versions)
            if not parsed:
                raise ValueError(f"denylist entry {name!r} has no versions")
            table[name] = frozenset(parsed)
            ordered[name] = parsed
        self._table = MappingProxyType(table)
        self._ordered = MappingProxyType(ordered)

    @classmethod
    def from_table(cls, table: Mapping[str, str]) -> Denylist:
        """Build from the ``name -> "v1,v2"`` encoding used by the embedded data."""
        return cls({name: raw.split(",") for name, raw in table.items()})

    def lookup(self, name: str) -> frozenset[str]:
        """Return the flagged versions for *name*, or an empty set."""
        return self._table.get(name, _EMPTY)

    def iter_specs(self) -> Iterator[str]:
        """Yield ``name@version`` for every flagged combination."""
        for name, versions in self._ordered.items():
            for version in versions:
                yield f"{name}@{version}"

    def __getitem__(self, name: str) -> frozenset[str]:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"Denylist({len(self)} packages)"


@lru_cache(maxsize=1)
def default_denylist() -> Denylist:
    """The built-in denylist, parsed once per process."""
    return Denylist.from_table(MALICIOUS_PACKAGES)
