"""Lockfile extraction passes — auto-registered on import."""

from lockwarden.engines.lockfile_scanner.extractors import (
    dependency_tree,  # noqa: F401
    packages_table,  # noqa: F401
)
