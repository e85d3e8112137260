"""lockwarden: detect known-compromised npm package versions in lockfiles."""

__version__ = "0.1.0"

import logging

# Silent unless the application configures logging (see core.logging.setup_logging).
logging.getLogger(__name__).addHandler(logging.NullHandler())

from lockwarden.config import ScanConfig
from lockwarden.engines.lockfile_scanner import (
    Denylist,
    LockfileScanner,
    Matcher,
    ResolvedPackage,
    ScanStatus,
    ScanVerdict,
    default_denylist,
    extract_packages,
    scan,
)

__all__ = [
    "Denylist",
    "LockfileScanner",
    "Matcher",
    "ResolvedPackage",
    "ScanConfig",
    "ScanStatus",
    "ScanVerdict",
    "default_denylist",
    "extract_packages",
    "scan",
]
