"""diagtest CLI."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from diagtest import __version__
from diagtest.case import SyntaxTestCase
from diagtest.config import DiagtestConfig, find_config, load_config
from diagtest.errors import DiagtestError, FrontendError
from diagtest.frontend import load_frontend
from diagtest.project import scaffold
from diagtest.render import print_record_list, print_source
from diagtest.runner import discover_fixtures, run_fixtures


def _load_config_or_default(start: Path) -> DiagtestConfig:
    try:
        return load_config(find_config(start))
    except FileNotFoundError:
        return DiagtestConfig()


def _use_color(option: bool | None, config: DiagtestConfig) -> bool:
    if option is not None:
        return option
    return config.output.color and sys.stdout.isatty()


def _load_case(fixture: str) -> SyntaxTestCase:
    try:
        return SyntaxTestCase.from_file(Path(fixture))
    except DiagtestError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)


color_option = click.option(
    "--color/--no-color", default=None, help="Force styled output on or off.",
)


@click.group()
@click.version_option(__version__, prog_name="diagtest")
def main() -> None:
    """Check compiler diagnostics against fixture expectations."""


@main.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--update", is_flag=True, help="Rewrite failing fixtures with obtained results.")
@click.option("--frontend", "frontend_entry", default=None, help="Frontend entry, 'module:callable'.")
@color_option
def run(paths: tuple[Path, ...], update: bool, frontend_entry: str | None, color: bool | None) -> None:
    """Run fixtures against the configured frontend."""
    start = paths[0] if paths else Path.cwd()
    config = _load_config_or_default(start)

    entry = frontend_entry or config.frontend.entry
    if not entry:
        click.echo("error: no frontend configured (set [frontend] entry or --frontend)", err=True)
        raise SystemExit(1)

    try:
        frontend = load_frontend(entry, config.base_dir)
    except FrontendError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    targets = list(paths) or [config.fixtures_dir]
    fixtures = discover_fixtures(targets, config.tests.pattern)
    if not fixtures:
        click.echo("warning: no fixtures found", err=True)
        return

    formatted = _use_color(color, config)
    stream = sys.stdout
    try:
        summary = run_fixtures(
            fixtures,
            frontend,
            stream,
            prefix=config.frontend.prefix,
            line_prefix=config.output.line_prefix,
            formatted=formatted,
            update=update,
            base_dir=config.base_dir,
        )
    except FrontendError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    if summary.updated:
        click.echo(f"updated {len(summary.updated)} fixture(s)")

    if summary.ok:
        click.echo(f"{summary.tests_run} tests, {summary.tests_passed} passed")
    else:
        click.echo(
            f"{summary.tests_run} tests, {summary.tests_passed} passed, "
            f"{summary.tests_failed} FAILED",
            err=True,
        )
        raise SystemExit(1)


@main.command()
@click.argument("fixture", type=click.Path(exists=True, dir_okay=False))
@color_option
def show(fixture: str, color: bool | None) -> None:
    """Render a fixture's source with its expected ranges highlighted."""
    config = _load_config_or_default(Path(fixture))
    case = _load_case(fixture)
    formatted = _use_color(color, config)
    stream = sys.stdout
    print_source(stream, case.source, case.expectations, config.output.line_prefix, formatted)
    if formatted and case.source and not case.source.endswith("\n"):
        stream.write("\n")


@main.command()
@click.argument("fixture", type=click.Path(exists=True, dir_okay=False))
@color_option
@click.option("--raw", is_flag=True, help="Print the expectations section with syntax highlighting.")
def expectations(fixture: str, color: bool | None, raw: bool) -> None:
    """List the expected diagnostics parsed from a fixture."""
    config = _load_config_or_default(Path(fixture))
    formatted = _use_color(color, config)

    if raw:
        from pygments import highlight
        from pygments.formatters import TerminalFormatter

        from diagtest.highlight import ExpectationLexer

        text = Path(fixture).read_text()
        if formatted:
            text = highlight(text, ExpectationLexer(), TerminalFormatter())
        click.echo(text, nl=False, color=formatted)
        return

    case = _load_case(fixture)
    print_record_list(
        sys.stdout, case.expectations, config.output.line_prefix, formatted,
    )


@main.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.option("--frontend", "entry", default="", help="Frontend entry to write into the config.")
def init(directory: Path, entry: str) -> None:
    """Create diagtest.toml and a sample fixture."""
    try:
        config_path = scaffold(directory, entry=entry)
    except FileExistsError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)
    click.echo(f"created {config_path}")
