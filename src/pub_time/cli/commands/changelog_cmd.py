"""Implementation of the 'changelog' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pub_time.cli.commands.common import build_release_context
from pub_time.core.changelog import release_link, render_changelog

if TYPE_CHECKING:
    from rich.console import Console


def run_changelog(
    path: str | None,
    prev_hash: str | None,
    prev_version: str | None,
    link: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Print the release notes of the pending release.

    Args:
        path: Optional path to project directory
        prev_hash: Hash of the last released commit ("all" for every commit)
        prev_version: Previously published version override
        link: Also print a prefilled GitHub release link
        console: Console for standard output
        err_console: Console for error output
    """
    ctx = build_release_context(path, prev_hash, prev_version, err_console)
    release = ctx.release

    if release.is_empty:
        console.print("[yellow]No commits found since last release. Nothing to release.[/]")
        return

    notes = render_changelog(release)
    console.print(notes.rstrip("\n"), markup=False, highlight=False)

    if not link:
        return

    url = release_link(ctx.homepage, release.next_version, notes, tag_prefix=ctx.config.tag_prefix)
    if url is None:
        err_console.print(
            "[yellow]No GitHub homepage configured.[/] "
            "Set [cyan]homepage[/] in \\[tool.pub-time] or [cyan]\\[project.urls][/]."
        )
        return
    console.print()
    console.print("Prefilled GitHub release link:")
    console.print(url, markup=False, highlight=False, soft_wrap=True)
