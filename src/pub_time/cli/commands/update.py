"""'update': write the next version and release notes into the project.

With ``--tag`` the release commit and annotated tag are created as well.
Pushing is always left to the user and printed as a hint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from pub_time.cli.commands.common import build_release_context, version_transition
from pub_time.core.changelog import release_link, render_changelog
from pub_time.exceptions import PubTimeError
from pub_time.project.changelog_file import prepend_release_notes
from pub_time.project.pyproject import update_pyproject_version

if TYPE_CHECKING:
    from rich.console import Console


def run_update(
    path: str | None,
    execute: bool,
    create_tag: bool,
    prev_hash: str | None,
    prev_version: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Preview or apply the pending release.

    Args:
        path: Project directory, or None for the current directory
        execute: Apply the changes instead of previewing them
        create_tag: After applying, commit everything and create the release tag
        prev_hash: Hash of the last released commit ("all" for every commit)
        prev_version: Previously published version override
        console: Console for regular output
        err_console: Console for errors
    """
    ctx = build_release_context(path, prev_hash, prev_version, err_console)
    config = ctx.config
    release = ctx.release

    try:
        dirty = not config.allow_dirty and ctx.repo.is_dirty()
    except PubTimeError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e
    if dirty:
        err_console.print(
            "[red]Error:[/] The working tree has uncommitted changes.\n"
            "Clean it up first, or set [cyan]allow_dirty = true[/] under \\[tool.pub-time]."
        )
        raise SystemExit(1)

    if release.is_empty:
        console.print("[yellow]Nothing to release: no commits since the last release.[/]")
        return

    next_version = release.next_version
    notes = render_changelog(release)

    mode = "[green]EXECUTING[/]" if execute else "[yellow]DRY-RUN[/]"
    if release.prev_version.is_new:
        console.print(f"\n{mode} - first release, version [green]{next_version}[/]\n")
    else:
        console.print(f"\n{mode} - {version_transition(release)}\n")

    changelog_path = config.changelog.path
    tag = f"{config.tag_prefix}{next_version}"

    if not execute:
        changes = ["  - Update version in [cyan]pyproject.toml[/]"]
        if config.changelog.enabled:
            changes.append(f"  - Prepend release notes to [cyan]{changelog_path}[/]")
        if create_tag:
            changes.append(f"  - Commit and tag [cyan]{tag}[/]")
        console.print(
            Panel(
                "[bold]Planned changes:[/]\n\n" + "\n".join(changes),
                title="[yellow]pub-time update (dry-run)[/]",
                border_style="yellow",
            )
        )
        console.print(notes.rstrip("\n"), markup=False, highlight=False)
        console.print("\n[dim]Nothing was written. Pass [cyan]--execute[/] to apply.[/]")
        return

    try:
        update_pyproject_version(ctx.project_path, str(next_version))
        console.print("  [green]✓[/] Updated version in pyproject.toml")
    except PubTimeError as e:
        err_console.print(f"[red]Error updating pyproject.toml:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if config.changelog.enabled:
        try:
            prepend_release_notes(ctx.project_path / changelog_path, next_version, notes)
            console.print(f"  [green]✓[/] Updated {changelog_path}")
        except PubTimeError as e:
            err_console.print(f"[red]Error updating changelog:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    if create_tag:
        try:
            ctx.repo.commit_all(f"ci: release {tag}")
            ctx.repo.create_tag(tag, str(next_version))
            console.print(f"  [green]✓[/] Committed and tagged {tag}")
        except PubTimeError as e:
            err_console.print(f"[red]Error creating release commit:[/] {escape(str(e))}")
            raise SystemExit(1) from e
        steps = f"To publish:\n  Push: [cyan]git push && git push origin {tag}[/]"
    else:
        steps = (
            "To publish:\n"
            "  1. Check the diff\n"
            f"  2. Commit: [cyan]git add . && git commit -m 'ci: release {tag}'[/]\n"
            f"  3. Tag: [cyan]git tag -a {tag} -m '{next_version}'[/]\n"
            f"  4. Push: [cyan]git push && git push origin {tag}[/]"
        )
    console.print(
        Panel(
            f"[green]Project files now at {next_version}.[/]\n\n{steps}",
            title="[green]pub-time update[/]",
            border_style="green",
        )
    )

    url = release_link(ctx.homepage, next_version, notes, tag_prefix=config.tag_prefix)
    if url is not None:
        console.print("Prefilled GitHub release link:")
        console.print(url, markup=False, highlight=False, soft_wrap=True)
