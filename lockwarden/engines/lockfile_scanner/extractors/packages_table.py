"""Extractor for the flat ``packages`` table (lockfileVersion 2 and 3)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lockwarden.core.logging import get_logger
from lockwarden.engines.lockfile_scanner.models import ResolvedPackage
from lockwarden.engines.lockfile_scanner.registry import register_extractor

log = get_logger("lockwarden.extract")

_NODE_MODULES = "node_modules/"


def package_name_from_path(path: str) -> str | None:
    """Recover the package name from a ``packages`` key.

    ``""`` is the root project and yields None. Nested installs such as
    ``node_modules/a/node_modules/@s/b`` resolve to the innermost name.
    Keys outside ``node_modules`` (workspace folders) are kept as-is.
    """
    if path == "":
        return None
    idx = path.rfind(_NODE_MODULES)
    if idx == -1:
        return path
    return path[idx + len(_NODE_MODULES) :] or None


def coerce_version(value: Any) -> str | None:
    """Return *value* as a version string, or None if it is empty or not scalar."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


class PackagesTableExtractor:
    schema = "packages-table"
    top_level_key = "packages"

    def extract(self, document: Mapping[str, Any]) -> set[ResolvedPackage]:
        table = document.get(self.top_level_key)
        if not isinstance(table, Mapping):
            return set()

        found: set[ResolvedPackage] = set()
        for path, entry in table.items():
            if not isinstance(entry, Mapping):
                log.debug(
                    "extract.skip_entry", schema=self.schema, path=path, reason="not an object"
                )
                continue
            version = coerce_version(entry.get("version"))
            if version is None:
                continue
            name = package_name_from_path(path)
            if name is None:
                continue
            found.add(ResolvedPackage(name=name, version=version))
        return found


register_extractor(PackagesTableExtractor())
