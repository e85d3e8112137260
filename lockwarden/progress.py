"""Progress tracking for the scan pipeline."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Any, Callable

from lockwarden.core.logging import get_logger

log = get_logger("lockwarden.progress")


class ScanPhase(str, enum.Enum):
    LOCATE = "locate"
    LOAD = "load"
    PARSE = "parse"
    EXTRACT = "extract"
    CLASSIFY = "classify"
    FINALIZE = "finalize"


@dataclass
class PhaseProgress:
    phase: ScanPhase
    status: str = "pending"  # "pending" | "running" | "completed" | "failed"
    start_time: float | None = None
    end_time: float | None = None
    detail: str = ""
    error: str | None = None

    @property
    def duration(self) -> float | None:
        if self.start_time is not None and self.end_time is not None:
            return round(self.end_time - self.start_time, 4)
        return None


class ProgressTracker:
    """Track phases of one scan. One tracker per scan; never shared."""

    def __init__(self) -> None:
        self.phases: list[PhaseProgress] = []
        self._by_phase: dict[ScanPhase, PhaseProgress] = {}
        self.callbacks: list[Callable[[PhaseProgress], None]] = []

    def start_phase(self, phase: ScanPhase) -> None:
        p = PhaseProgress(phase=phase, status="running", start_time=time.monotonic())
        self.phases.append(p)
        self._by_phase[phase] = p
        self._notify(p)

    def complete_phase(self, phase: ScanPhase, detail: str = "") -> None:
        p = self._by_phase.get(phase)
        if p:
            p.status = "completed"
            p.end_time = time.monotonic()
            p.detail = detail
            self._notify(p)

    def fail_phase(self, phase: ScanPhase, error: str) -> None:
        p = self._by_phase.get(phase)
        if p:
            p.status = "failed"
            p.end_time = time.monotonic()
            p.error = error
            self._notify(p)

    def get_summary(self) -> dict[str, Any]:
        total_duration = sum(p.duration or 0 for p in self.phases)
        return {
            "phases": [
                {
                    "phase": p.phase.value,
                    "status": p.status,
                    "duration": p.duration,
                    "detail": p.detail,
                    "error": p.error,
                }
                for p in self.phases
            ],
            "total_duration": round(total_duration, 4),
        }

    def _notify(self, p: PhaseProgress) -> None:
        for cb in self.callbacks:
            try:
                cb(p)
            except Exception:
                log.debug("progress.callback_error", phase=p.phase.value, exc_info=True)
