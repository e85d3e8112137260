"""LockfileScanner — locate, load, parse, extract, classify, finalize."""

from __future__ import annotations

# Ensure extractors are registered before any scan runs.
import lockwarden.engines.lockfile_scanner.extractors  # noqa: F401
from lockwarden.config import ScanConfig
from lockwarden.core.logging import get_logger
from lockwarden.engines.lockfile_scanner.denylist import Denylist
from lockwarden.engines.lockfile_scanner.document import load_document
from lockwarden.engines.lockfile_scanner.matcher import Matcher
from lockwarden.engines.lockfile_scanner.models import ResolvedPackage, ScanStatus, ScanVerdict
from lockwarden.engines.lockfile_scanner.registry import extract_packages
from lockwarden.engines.lockfile_scanner.source import LocalManifestSource, ManifestSource
from lockwarden.exceptions import LockwardenError, ManifestNotFoundError, ManifestReadError
from lockwarden.progress import PhaseProgress, ProgressTracker, ScanPhase
from lockwarden.reporting import (
    ConsoleReporter,
    EventLevel,
    FileReporter,
    MultiReporter,
    RecordingReporter,
    Reporter,
)

log = get_logger("lockwarden.engine")

REMEDIATION_STEPS = (
    "1. Remove the malicious packages immediately",
    "2. Rotate all access tokens for GitHub, NPM, AWS, GCP, and Azure",
    "3. Check for unauthorized GitHub repositories named 'Shai-Hulud'",
    "4. Scan your system with TruffleHog to detect any leaked secrets",
    "5. Review recent npm publish activities on your account",
)


def build_reporter(config: ScanConfig, console: bool = True) -> Reporter:
    """Console reporter, plus a file reporter when ``output_file`` is set.

    With neither, events are only recorded in memory.
    Raises :class:`OSError` if the output file cannot be created.
    """
    reporters: list[Reporter] = []
    if console:
        reporters.append(ConsoleReporter(verbose=config.verbose))
    if config.output_file is not None:
        reporters.append(FileReporter(config.output_file, verbose=config.verbose))
    if not reporters:
        return RecordingReporter()
    if len(reporters) == 1:
        return reporters[0]
    return MultiReporter(*reporters)


class LockfileScanner:
    """Runs scans against one denylist and manifest source.

    The scanner itself holds only read-only collaborators. Each :meth:`scan`
    call owns its own document, tracker and counters, so independent scans
    never share state. A reporter shared between concurrent scans must
    serialize its own writes (:class:`FileReporter` does).
    """

    def __init__(
        self,
        denylist: Denylist | None = None,
        source: ManifestSource | None = None,
    ) -> None:
        self._matcher = Matcher(denylist)
        self._source = source if source is not None else LocalManifestSource()

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    def scan(self, config: ScanConfig, reporter: Reporter | None = None) -> ScanVerdict:
        if reporter is None:
            reporter = ConsoleReporter(verbose=config.verbose)
        path = str(config.manifest_path)

        tracker = ProgressTracker()
        tracker.callbacks.append(lambda p: _report_phase(reporter, p))

        reporter.emit(EventLevel.INFO, f"Scanning {path} for malicious packages...")
        reporter.emit(
            EventLevel.INFO,
            "This scan checks for packages compromised in the Shai-Hulud npm supply chain attack",
        )

        try:
            packages = self._prepare(path, tracker, reporter)
        except LockwardenError as exc:
            reporter.emit(EventLevel.ERROR, str(exc))
            log.info(
                "scanner.aborted", path=path, error_type=type(exc).__name__, error=str(exc)
            )
            return ScanVerdict(status=ScanStatus.ERROR, manifest_path=path, error=str(exc))

        tracker.start_phase(ScanPhase.CLASSIFY)
        total, matches = self._classify(packages, reporter)
        tracker.complete_phase(
            ScanPhase.CLASSIFY, detail=f"{total} checked, {len(matches)} malicious"
        )

        tracker.start_phase(ScanPhase.FINALIZE)
        verdict = ScanVerdict(
            status=ScanStatus.THREATS_FOUND if matches else ScanStatus.CLEAN,
            total_checked=total,
            malicious_found=tuple(matches),
            manifest_path=path,
        )
        _report_verdict(reporter, verdict)
        tracker.complete_phase(ScanPhase.FINALIZE, detail=verdict.status.value)

        log.info(
            "scanner.completed",
            path=path,
            status=verdict.status.value,
            total_checked=total,
            malicious=len(matches),
            phases=tracker.get_summary()["phases"],
        )
        return verdict

    # ── phases ───────────────────────────────────────────────────────────

    def _prepare(
        self, path: str, tracker: ProgressTracker, reporter: Reporter
    ) -> list[ResolvedPackage]:
        """Locate, load, parse and extract. Raises on the first fatal error."""
        tracker.start_phase(ScanPhase.LOCATE)
        if not self._source.exists(path):
            exc = ManifestNotFoundError(path)
            tracker.fail_phase(ScanPhase.LOCATE, str(exc))
            raise exc
        tracker.complete_phase(ScanPhase.LOCATE)

        tracker.start_phase(ScanPhase.LOAD)
        try:
            raw = self._source.read_all(path)
        except OSError as err:
            exc = ManifestReadError(path, err.strerror or str(err))
            tracker.fail_phase(ScanPhase.LOAD, str(exc))
            raise exc from err
        tracker.complete_phase(ScanPhase.LOAD, detail=f"{len(raw)} bytes")

        tracker.start_phase(ScanPhase.PARSE)
        try:
            document = load_document(raw, source=path)
        except LockwardenError as exc:
            tracker.fail_phase(ScanPhase.PARSE, str(exc))
            raise
        tracker.complete_phase(ScanPhase.PARSE)

        tracker.start_phase(ScanPhase.EXTRACT)
        reporter.emit(EventLevel.VERBOSE, f"Extracting package information from {path}")
        packages = extract_packages(document)
        tracker.complete_phase(ScanPhase.EXTRACT, detail=f"{len(packages)} packages")
        return packages

    def _classify(
        self, packages: list[ResolvedPackage], reporter: Reporter
    ) -> tuple[int, list[ResolvedPackage]]:
        total = 0
        matches: list[ResolvedPackage] = []
        for package in packages:
            total += 1
            reporter.emit(EventLevel.VERBOSE, f"Checking {package.spec}")
            if self._matcher.matches(package):
                reporter.emit(
                    EventLevel.WARNING, f"🚨 MALICIOUS PACKAGE DETECTED: {package.spec}"
                )
                matches.append(package)
        return total, matches


def _report_phase(reporter: Reporter, p: PhaseProgress) -> None:
    if p.status == "failed":
        log.debug("scanner.phase_failed", phase=p.phase.value, error=p.error)
        return
    log.debug("scanner.phase", phase=p.phase.value, status=p.status, detail=p.detail)
    suffix = f" ({p.detail})" if p.detail else ""
    reporter.emit(EventLevel.VERBOSE, f"Phase {p.phase.value}: {p.status}{suffix}")


def _report_verdict(reporter: Reporter, verdict: ScanVerdict) -> None:
    reporter.emit(
        EventLevel.INFO, f"Scan completed. Total packages checked: {verdict.total_checked}"
    )
    if verdict.status is ScanStatus.THREATS_FOUND:
        reporter.emit(
            EventLevel.ERROR,
            f"⚠️  SECURITY ALERT: Found {len(verdict.malicious_found)} malicious package(s)!",
        )
        reporter.emit(
            EventLevel.ERROR, "These packages are part of the Shai-Hulud npm supply chain attack."
        )
        reporter.emit(EventLevel.ERROR, "IMMEDIATE ACTIONS REQUIRED:")
        for step in REMEDIATION_STEPS:
            reporter.emit(EventLevel.ERROR, step)
    else:
        reporter.emit(
            EventLevel.SUCCESS,
            "✅ No malicious packages detected. Your project appears to be safe.",
        )


def scan(
    config: ScanConfig | None = None,
    *,
    reporter: Reporter | None = None,
    denylist: Denylist | None = None,
    source: ManifestSource | None = None,
) -> ScanVerdict:
    """Run one scan (no CLI required).

    With no *reporter*, events go to the console and, if configured, to
    ``config.output_file``.
    """
    config = config or ScanConfig()
    owned = reporter is None
    if reporter is None:
        reporter = build_reporter(config)
    try:
        return LockfileScanner(denylist, source).scan(config, reporter)
    finally:
        if owned:
            reporter.close()
