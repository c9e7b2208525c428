"""CLI entry point: sbomgen.

Subcommands:
    sbomgen gen ./myproject -f json -o sbom.json   # Generate an SBOM
    sbomgen analyze ./myproject                    # List detected dependencies
    sbomgen version                                # Show version information
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from sbomgen import __version__
from sbomgen.analyzer import ProjectAnalyzer, detect_project_type
from sbomgen.core.logging import setup_logging
from sbomgen.exceptions import SbomgenError
from sbomgen.formatter import FORMAT_NAMES, get_formatter, render_table
from sbomgen.models import SBOM

APP_NAME = "sbomgen"
SERIAL_NUMBER = "sbom-001"


def _resolve_dir(directory: str | None, dir_option: str | None) -> Path:
    return Path(dir_option or directory or ".").absolute()


def _fail(exc: SbomgenError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """sbomgen - Software Bill of Materials Generator."""
    setup_logging("DEBUG" if verbose else None)


@main.command("gen")
@click.argument("directory", required=False)
@click.option("-d", "--dir", "dir_option", default=None, help="Project directory (default: .)")
@click.option("-o", "--output", default=None, help="Output file (default: stdout)")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(FORMAT_NAMES, case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format",
)
def gen(
    directory: str | None, dir_option: str | None, output: str | None, output_format: str
) -> None:
    """Generate an SBOM from a project directory."""
    project_dir = _resolve_dir(directory, dir_option)

    # Status lines go to stderr when the report itself is written to stdout.
    status_to_stderr = output is None
    click.echo(f"Detected project type: {detect_project_type(project_dir)}", err=status_to_stderr)

    try:
        components = ProjectAnalyzer().analyze_dir(project_dir)
        click.echo(f"Found {len(components)} components", err=status_to_stderr)

        sbom = SBOM(APP_NAME, __version__, SERIAL_NUMBER)
        for comp in components:
            sbom.add_component(comp)

        rendered = get_formatter(output_format).format(sbom)
    except SbomgenError as e:
        _fail(e)
        return

    if output:
        try:
            Path(output).write_text(rendered + "\n")
        except OSError as e:
            click.echo(f"Error: failed to write output file: {e}", err=True)
            sys.exit(1)
        click.echo(f"SBOM written to {output}")
    else:
        click.echo(rendered)


@main.command("analyze")
@click.argument("directory", required=False)
@click.option("-d", "--dir", "dir_option", default=None, help="Project directory (default: .)")
def analyze(directory: str | None, dir_option: str | None) -> None:
    """Analyze a project and list its dependencies."""
    project_dir = _resolve_dir(directory, dir_option)

    click.echo(f"Project: {project_dir}")
    click.echo(f"Type: {detect_project_type(project_dir)}")

    try:
        components = ProjectAnalyzer().analyze_dir(project_dir)
    except SbomgenError as e:
        _fail(e)
        return

    click.echo(f"\nFound {len(components)} components:\n")
    click.echo(render_table(components), nl=False)


@main.command("version")
def version() -> None:
    """Show version information."""
    click.echo(f"{APP_NAME} version {__version__}")


if __name__ == "__main__":
    main()
