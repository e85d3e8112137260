"""CLI entry point: lockwarden.

Subcommands:
    lockwarden scan -f path/to/package-lock.json -v -o results.txt
    lockwarden create-list -o malicious_packages.txt
    lockwarden check @ctrl/tinycolor 4.1.1

Running ``lockwarden`` with no subcommand scans ./package-lock.json.
"""

from __future__ import annotations

import json
import sys

import click

from lockwarden import __version__
from lockwarden.config import ScanConfig
from lockwarden.core.logging import setup_logging
from lockwarden.engines.lockfile_scanner import (
    LockfileScanner,
    Matcher,
    ScanStatus,
    ScanVerdict,
    build_reporter,
    write_package_list,
)
from lockwarden.engines.lockfile_scanner.export import DEFAULT_LIST_FILE
from lockwarden.reporting import EventLevel, Reporter

_RULE = "=" * 64

ADVISORY_LINKS = (
    "- https://jfrog.com/blog/shai-hulud-npm-supply-chain-attack-new-compromised-packages-detected/",
    "- https://github.com/trufflesecurity/trufflehog (for secret scanning)",
)


def _print_banner() -> None:
    click.echo(_RULE)
    click.echo("  Shai-Hulud NPM Supply Chain Attack Scanner")
    click.echo("  Detecting malicious packages in npm dependencies")
    click.echo(_RULE + "\n")


def _print_summary(reporter: Reporter, verdict: ScanVerdict, config: ScanConfig) -> None:
    click.echo("\n" + _RULE)
    click.echo("  Scan Summary")
    click.echo(_RULE)

    if verdict.status is ScanStatus.CLEAN:
        reporter.emit(EventLevel.SUCCESS, "No security threats detected.")
    elif verdict.status is ScanStatus.THREATS_FOUND:
        reporter.emit(EventLevel.ERROR, "Security threats found! Please take immediate action.")
        reporter.emit(EventLevel.INFO, "For more information about this attack, visit:")
        for link in ADVISORY_LINKS:
            reporter.emit(EventLevel.INFO, link)
    else:
        reporter.emit(EventLevel.ERROR, f"Scan failed: {verdict.error}")

    if config.output_file is not None:
        reporter.emit(EventLevel.INFO, f"Detailed results saved to: {config.output_file}")


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="lockwarden")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Scan npm lockfiles for packages compromised in the Shai-Hulud attack."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(scan_command)


@main.command("scan")
@click.option(
    "-f",
    "--file",
    "manifest",
    default=None,
    help="package-lock.json path (default: ./package-lock.json or $LOCKWARDEN_MANIFEST)",
)
@click.option("-v", "--verbose", is_flag=True, default=None, help="Enable verbose output")
@click.option("-o", "--output", default=None, help="Also write results to this file")
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
def scan_command(
    manifest: str | None = None,
    verbose: bool | None = None,
    output: str | None = None,
    as_json: bool = False,
) -> None:
    """Scan a lockfile for malicious package versions."""
    config = ScanConfig.from_env().with_overrides(
        manifest_path=manifest, verbose=verbose or None, output_file=output
    )
    setup_logging(verbose=config.verbose)

    try:
        reporter = build_reporter(config, console=not as_json)
    except OSError as e:
        click.echo(
            click.style("[ERROR]", fg="red")
            + f" Could not write to output file {config.output_file}: {e}",
            err=True,
        )
        sys.exit(1)

    try:
        if as_json:
            verdict = LockfileScanner().scan(config, reporter=reporter)
            click.echo(json.dumps(verdict.to_dict(), indent=2))
        else:
            _print_banner()
            if config.output_file is not None:
                reporter.emit(EventLevel.INFO, f"Results will be saved to: {config.output_file}")
            verdict = LockfileScanner().scan(config, reporter=reporter)
            _print_summary(reporter, verdict, config)
    finally:
        reporter.close()

    sys.exit(verdict.exit_code)


@main.command("create-list")
@click.option("-o", "--output", default=DEFAULT_LIST_FILE, help="Output file path")
def create_list(output: str) -> None:
    """Write a text file listing every malicious package@version."""
    try:
        path = write_package_list(output)
    except OSError as e:
        click.echo(click.style("[ERROR]", fg="red") + f" Failed to create list: {e}", err=True)
        sys.exit(1)
    click.echo(f"Malicious package list created: {path}")


@main.command("check")
@click.argument("name")
@click.argument("version")
def check(name: str, version: str) -> None:
    """Check a single NAME VERSION pair; exit 1 if it is known-malicious."""
    if Matcher().is_malicious(name, version):
        click.echo(click.style("[WARNING]", fg="yellow") + f" {name}@{version} is malicious")
        sys.exit(1)
    click.echo(click.style("[SUCCESS]", fg="green") + f" {name}@{version} is not on the denylist")


if __name__ == "__main__":
    main()
