"""Reporter abstract interface."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class EventLevel(str, enum.Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    VERBOSE = "VERBOSE"


class Reporter(ABC):
    """Sink for user-facing scan events."""

    @abstractmethod
    def emit(self, level: EventLevel, message: str) -> None:
        """Render one event."""
        ...

    def close(self) -> None:
        """Release any held resources."""


class MultiReporter(Reporter):
    """Fan each event out to several reporters, in order."""

    def __init__(self, *reporters: Reporter) -> None:
        self.reporters = list(reporters)

    def emit(self, level: EventLevel, message: str) -> None:
        for reporter in self.reporters:
            reporter.emit(level, message)

    def close(self) -> None:
        for reporter in self.reporters:
            reporter.close()


class RecordingReporter(Reporter):
    """Keeps events in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[EventLevel, str]] = []

    def emit(self, level: EventLevel, message: str) -> None:
        self.events.append((level, message))

    def messages(self, level: EventLevel | None = None) -> list[str]:
        return [m for lvl, m in self.events if level is None or lvl is level]
