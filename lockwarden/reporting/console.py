"""Colored console reporter."""

from __future__ import annotations

import click

from lockwarden.reporting.base import EventLevel, Reporter

_STYLES: dict[EventLevel, tuple[str, bool]] = {
    # level -> (color, to stderr)
    EventLevel.ERROR: ("red", True),
    EventLevel.WARNING: ("yellow", True),
    EventLevel.SUCCESS: ("green", False),
    EventLevel.INFO: ("blue", False),
    EventLevel.VERBOSE: ("blue", False),
}


class ConsoleReporter(Reporter):
    def __init__(self, verbose: bool = False, color: bool | None = None) -> None:
        self.verbose = verbose
        self.color = color

    def emit(self, level: EventLevel, message: str) -> None:
        if level is EventLevel.VERBOSE and not self.verbose:
            return
        fg, err = _STYLES[level]
        tag = click.style(f"[{level.value}]", fg=fg)
        click.echo(f"{tag} {message}", err=err, color=self.color)
