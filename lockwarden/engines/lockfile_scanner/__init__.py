"""Lockfile scanner engine — find known-compromised packages in npm lockfiles."""

from lockwarden.engines.lockfile_scanner.denylist import Denylist, default_denylist
from lockwarden.engines.lockfile_scanner.export import render_package_list, write_package_list
from lockwarden.engines.lockfile_scanner.matcher import Matcher, is_malicious
from lockwarden.engines.lockfile_scanner.models import (
    ManifestNode,
    ResolvedPackage,
    ScanStatus,
    ScanVerdict,
    UnversionedNode,
    VersionedNode,
)
from lockwarden.engines.lockfile_scanner.registry import extract_packages
from lockwarden.engines.lockfile_scanner.scanner import LockfileScanner, build_reporter, scan

__all__ = [
    "Denylist",
    "LockfileScanner",
    "ManifestNode",
    "Matcher",
    "ResolvedPackage",
    "ScanStatus",
    "ScanVerdict",
    "UnversionedNode",
    "VersionedNode",
    "build_reporter",
    "default_denylist",
    "extract_packages",
    "is_malicious",
    "render_package_list",
    "scan",
    "write_package_list",
]
