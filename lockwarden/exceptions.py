"""Custom exceptions for lockwarden."""


class LockwardenError(Exception):
    """Base exception for all scanner errors."""


class ManifestNotFoundError(LockwardenError):
    """Raised when the manifest path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class ManifestReadError(LockwardenError):
    """Raised when an existing manifest cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file: {reason}")


class InvalidManifestError(LockwardenError):
    """Raised when manifest content is not a JSON object."""


class PartialExtractionError(LockwardenError):
    """Raised for a malformed sub-tree while walking a dependency tree.

    Always recovered by the extractor; never aborts a scan.
    """

    def __init__(self, path: list[str], reason: str):
        self.path = list(path)
        self.reason = reason
        super().__init__(f"{' > '.join(self.path) or '<root>'}: {reason}")
