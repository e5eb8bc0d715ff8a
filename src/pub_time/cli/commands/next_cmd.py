"""Implementation of the 'next' command.

Prints the version the pending commits would be released as.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pub_time.cli.commands.common import build_release_context, version_transition

if TYPE_CHECKING:
    from rich.console import Console


def run_next(
    path: str | None,
    prev_hash: str | None,
    prev_version: str | None,
    semver_only: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the next command.

    Args:
        path: Optional path to project directory
        prev_hash: Hash of the last released commit ("all" for every commit)
        prev_version: Previously published version override
        semver_only: Print only the next version string
        console: Console for standard output
        err_console: Console for error output
    """
    ctx = build_release_context(path, prev_hash, prev_version, err_console)
    release = ctx.release

    if release.is_empty:
        # stdout stays empty so scripts capturing --semver read no version
        out = err_console if semver_only else console
        out.print("[yellow]No commits found since last release. Nothing to release.[/]")
        return

    if semver_only:
        console.print(release.next_version.to_semver_string(), highlight=False)
        return

    console.print(version_transition(release), highlight=False)
    console.print(
        f"[dim]{len(release.commits)} commit(s): "
        f"{len(release.majors)} breaking, {len(release.minors)} feature, "
        f"{len(release.patches)} other ({release.bump} bump)[/]"
    )
