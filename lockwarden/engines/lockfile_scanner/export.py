"""Flat ``name@version`` export of a denylist."""

from __future__ import annotations

from pathlib import Path

from lockwarden.engines.lockfile_scanner.denylist import Denylist, default_denylist

DEFAULT_LIST_FILE = "malicious_packages.txt"

LIST_HEADER = (
    "# Shai-Hulud NPM Supply Chain Attack - Malicious Package List",
    "# Generated by lockwarden",
    "# Source: JFrog Security Research",
)


def render_package_list(denylist: Denylist | None = None) -> str:
    """Header block, a blank line, then one ``name@version`` per line."""
    denylist = denylist if denylist is not None else default_denylist()
    lines = [*LIST_HEADER, "", *denylist.iter_specs()]
    return "\n".join(lines) + "\n"


def write_package_list(
    path: str | Path = DEFAULT_LIST_FILE, denylist: Denylist | None = None
) -> Path:
    """Write the export to *path*. Raises :class:`OSError` on failure."""
    target = Path(path)
    target.write_text(render_package_list(denylist), encoding="utf-8")
    return target
