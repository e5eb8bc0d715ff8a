"""Command line interface for pub-time."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pub_time import __version__
from pub_time.cli.commands.changelog_cmd import run_changelog
from pub_time.cli.commands.next_cmd import run_next
from pub_time.cli.commands.update import run_update

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Compute the next release version and changelog from conventional commits.",
)
console = Console()
err_console = Console(stderr=True)

PathArg = typer.Argument(None, help="Project directory (defaults to the current directory)")
PrevHashOpt = typer.Option(
    None,
    "--prev-hash",
    help="Hash of the last released commit. Use 'all' to include every commit.",
)
PrevVersionOpt = typer.Option(
    None,
    "--prev-version",
    help="Previously published version (defaults to the newest version tag).",
)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)


@app.command("next")
def next_command(
    path: str | None = PathArg,
    prev_hash: str | None = PrevHashOpt,
    prev_version: str | None = PrevVersionOpt,
    semver: bool = typer.Option(False, "--semver", help="Print only the next version."),
) -> None:
    """Show the next version."""
    run_next(path, prev_hash, prev_version, semver, console, err_console)


@app.command("changelog")
def changelog_command(
    path: str | None = PathArg,
    prev_hash: str | None = PrevHashOpt,
    prev_version: str | None = PrevVersionOpt,
    link: bool = typer.Option(False, "--link", help="Also print a GitHub release link."),
) -> None:
    """Show release notes for the pending commits."""
    run_changelog(path, prev_hash, prev_version, link, console, err_console)


@app.command("update")
def update_command(
    path: str | None = PathArg,
    execute: bool = typer.Option(False, "--execute", help="Apply changes (default is dry-run)."),
    tag: bool = typer.Option(
        False, "--tag", help="With --execute, commit the release and create its tag."
    ),
    prev_hash: str | None = PrevHashOpt,
    prev_version: str | None = PrevVersionOpt,
) -> None:
    """Write the next version to pyproject.toml and update the changelog."""
    run_update(path, execute, tag, prev_hash, prev_version, console, err_console)


def main() -> None:
    app()
