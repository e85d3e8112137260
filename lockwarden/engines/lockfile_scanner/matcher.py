"""Matcher — classify one resolved pair against a denylist."""

from __future__ import annotations

from lockwarden.engines.lockfile_scanner.denylist import Denylist, default_denylist
from lockwarden.engines.lockfile_scanner.models import ResolvedPackage


class Matcher:
    """Exact-match classifier. Never raises."""

    def __init__(self, denylist: Denylist | None = None) -> None:
        self._denylist = denylist if denylist is not None else default_denylist()

    @property
    def denylist(self) -> Denylist:
        return self._denylist

    def is_malicious(self, name: str, version: str) -> bool:
        if not name or not version:
            return False
        return version in self._denylist.lookup(name)

    def matches(self, package: ResolvedPackage) -> bool:
        return self.is_malicious(package.name, package.version)


def is_malicious(name: str, version: str, denylist: Denylist | None = None) -> bool:
    """Module-level shortcut using the built-in denylist by default."""
    return Matcher(denylist).is_malicious(name, version)
