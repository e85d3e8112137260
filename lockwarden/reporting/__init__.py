"""Reporters — render scan events for people and files."""

from lockwarden.reporting.base import EventLevel, MultiReporter, RecordingReporter, Reporter
from lockwarden.reporting.console import ConsoleReporter
from lockwarden.reporting.local import FileReporter

__all__ = [
    "ConsoleReporter",
    "EventLevel",
    "FileReporter",
    "MultiReporter",
    "RecordingReporter",
    "Reporter",
]
