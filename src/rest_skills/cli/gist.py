"""Command-line interface for GitHub Gist CRUD operations."""

import click

from ..gist import GistFetcher
from ..gist.config import GistConfig
from ..utils.io import read_stdin_content
from .common import (
    CONTEXT_SETTINGS,
    SkillContext,
    SkillGroup,
    add_help_command,
    common_options,
    configure_invocation,
    echo_json,
    echo_lines,
)


def _build_fetcher(env_file: str | None) -> GistFetcher:
    return GistFetcher(config=GistConfig.from_env(env_file))


def _fetcher(ctx: click.Context) -> GistFetcher:
    return ctx.find_object(SkillContext).fetcher()


@click.group(
    cls=SkillGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS
)
@common_options
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None, read_only: bool) -> None:
    """Lightweight GitHub Gist CRUD via the REST API.

    Requires GITHUB_TOKEN with the 'gist' scope, exported or set in a .env
    file. Commands reading content (create, update, add) take it from stdin.
    """
    configure_invocation(verbose, read_only)
    ctx.obj = SkillContext(env_file=env_file, factory=_build_fetcher)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("list")
@click.option("--per-page", type=int, default=30, show_default=True)
@click.option("--page", type=int, default=1, show_default=True)
@click.pass_context
def list_command(ctx: click.Context, per_page: int, page: int) -> None:
    """List the authenticated user's gists."""
    gists = _fetcher(ctx).list_gists(per_page=per_page, page=page)
    echo_lines([gist.to_summary_line() for gist in gists])


@main.command("get")
@click.argument("gist_id")
@click.pass_context
def get_command(ctx: click.Context, gist_id: str) -> None:
    """Get a single gist (files + metadata) as JSON."""
    echo_json(_fetcher(ctx).get_gist_data(gist_id))


@main.command("read")
@click.argument("gist_id")
@click.argument("filename", required=False)
@click.pass_context
def read_command(ctx: click.Context, gist_id: str, filename: str | None) -> None:
    """Print the raw content of a file in a gist."""
    fetcher = _fetcher(ctx)
    gist_file = fetcher.get_file(gist_id, filename)
    content = fetcher.fetch_content(gist_file)
    if gist_file.needs_raw_fetch:
        # Raw downloads are printed exactly as served
        click.echo(content, nl=False)
    else:
        click.echo(content.rstrip("\n"))


@main.command("create")
@click.argument("description")
@click.argument("filename")
@click.option("--public", is_flag=True, help="Create a public gist (default: secret)")
@click.pass_context
def create_command(
    ctx: click.Context, description: str, filename: str, public: bool
) -> None:
    """Create a gist; content is read from stdin."""
    content = read_stdin_content()
    gist = _fetcher(ctx).create_gist(description, filename, content, public=public)
    click.echo(f"Created: {gist.id}")
    click.echo(f"URL:     {gist.html_url}")


@main.command("update")
@click.argument("gist_id")
@click.argument("filename")
@click.pass_context
def update_command(ctx: click.Context, gist_id: str, filename: str) -> None:
    """Update a file in a gist; content is read from stdin."""
    content = read_stdin_content()
    gist = _fetcher(ctx).update_file(gist_id, filename, content)
    click.echo(f"Updated: {gist.id}")
    click.echo(f"URL:     {gist.html_url}")


@main.command("rename")
@click.argument("gist_id")
@click.argument("old_name")
@click.argument("new_name")
@click.pass_context
def rename_command(
    ctx: click.Context, gist_id: str, old_name: str, new_name: str
) -> None:
    """Rename a file in a gist."""
    gist = _fetcher(ctx).rename_file(gist_id, old_name, new_name)
    click.echo(f"Renamed: {gist.id}")
    click.echo(f"URL:     {gist.html_url}")


@main.command("delete")
@click.argument("gist_id")
@click.pass_context
def delete_command(ctx: click.Context, gist_id: str) -> None:
    """Delete a gist (irreversible)."""
    _fetcher(ctx).delete_gist(gist_id)
    click.echo(f"Deleted: {gist_id}")


@main.command("add")
@click.argument("gist_id")
@click.argument("filename")
@click.pass_context
def add_command(ctx: click.Context, gist_id: str, filename: str) -> None:
    """Add a file to an existing gist; content is read from stdin."""
    content = read_stdin_content()
    gist = _fetcher(ctx).add_file(gist_id, filename, content)
    click.echo(f"Updated: {gist.id}")
    click.echo(f"URL:     {gist.html_url}")


@main.command("rm")
@click.argument("gist_id")
@click.argument("filename")
@click.pass_context
def rm_command(ctx: click.Context, gist_id: str, filename: str) -> None:
    """Remove a single file from a gist."""
    gist = _fetcher(ctx).remove_file(gist_id, filename)
    click.echo(f'Removed "{filename}" from {gist.id}')


@main.command("desc")
@click.argument("gist_id")
@click.argument("description")
@click.pass_context
def desc_command(ctx: click.Context, gist_id: str, description: str) -> None:
    """Update the description of a gist."""
    gist = _fetcher(ctx).update_description(gist_id, description)
    click.echo(f"Description updated: {gist.id}")


@main.command("search")
@click.argument("pattern")
@click.pass_context
def search_command(ctx: click.Context, pattern: str) -> None:
    """Search gists by description and file names (first 100 gists)."""
    lines = _fetcher(ctx).search_gists(pattern)
    if not lines:
        click.echo(f"No matches for '{pattern}'")
        return
    echo_lines(lines)


add_help_command(main)


if __name__ == "__main__":
    main()
