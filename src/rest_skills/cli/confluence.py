"""Command-line interface for Confluence Cloud page and space operations."""

import click

from ..confluence import ConfluenceFetcher
from ..confluence.config import ConfluenceConfig
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

STDIN_HINT = "Pipe HTML storage format into the command."

limit_option = click.option(
    "--limit", type=int, default=25, show_default=True, help="Maximum results"
)


def _build_fetcher(env_file: str | None) -> ConfluenceFetcher:
    return ConfluenceFetcher(config=ConfluenceConfig.from_env(env_file))


def _fetcher(ctx: click.Context) -> ConfluenceFetcher:
    return ctx.find_object(SkillContext).fetcher()


@click.group(
    cls=SkillGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS
)
@common_options
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None, read_only: bool) -> None:
    """Lightweight Confluence Cloud CRUD via the REST API.

    Requires CONFLUENCE_URL, CONFLUENCE_EMAIL and CONFLUENCE_API_TOKEN,
    exported or set in a .env file. Page bodies for create and update are
    read from stdin in storage format (XHTML).
    """
    configure_invocation(verbose, read_only)
    ctx.obj = SkillContext(env_file=env_file, factory=_build_fetcher)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("list-spaces")
@limit_option
@click.pass_context
def list_spaces_command(ctx: click.Context, limit: int) -> None:
    """List spaces."""
    spaces = _fetcher(ctx).list_spaces(limit=limit)
    echo_lines([space.to_summary_line() for space in spaces])


@main.command("list-pages")
@click.argument("space_id")
@limit_option
@click.pass_context
def list_pages_command(ctx: click.Context, space_id: str, limit: int) -> None:
    """List pages in a space."""
    pages = _fetcher(ctx).list_space_pages(space_id, limit=limit)
    echo_lines([page.to_summary_line() for page in pages])


@main.command("get")
@click.argument("page_id")
@click.pass_context
def get_command(ctx: click.Context, page_id: str) -> None:
    """Get page metadata and body as JSON."""
    echo_json(_fetcher(ctx).get_page_data(page_id))


@main.command("read")
@click.argument("page_id")
@click.pass_context
def read_command(ctx: click.Context, page_id: str) -> None:
    """Print the page body as storage HTML."""
    click.echo(_fetcher(ctx).get_page(page_id).body_or_placeholder)


@main.command("create")
@click.argument("space_id")
@click.argument("title")
@click.option("--parent", "parent_id", help="ID of the parent page")
@click.pass_context
def create_command(
    ctx: click.Context, space_id: str, title: str, parent_id: str | None
) -> None:
    """Create a page; the body is read from stdin."""
    body = read_stdin_content(hint=STDIN_HINT)
    page = _fetcher(ctx).create_page(space_id, title, body, parent_id=parent_id)
    click.echo(f"Created: {page.id}")
    click.echo(f"URL:     {page.url}")


@main.command("update")
@click.argument("page_id")
@click.argument("title")
@click.pass_context
def update_command(ctx: click.Context, page_id: str, title: str) -> None:
    """Update a page; the body is read from stdin."""
    body = read_stdin_content(hint=STDIN_HINT)
    page = _fetcher(ctx).update_page(page_id, title, body)
    click.echo(f"Updated: {page.id} (v{page.version})")
    click.echo(f"URL:     {page.url}")


@main.command("delete")
@click.argument("page_id")
@click.pass_context
def delete_command(ctx: click.Context, page_id: str) -> None:
    """Delete (trash) a page."""
    _fetcher(ctx).delete_page(page_id)
    click.echo(f"Deleted (trashed): {page_id}")


@main.command("search")
@click.argument("cql")
@limit_option
@click.pass_context
def search_command(ctx: click.Context, cql: str, limit: int) -> None:
    """Search content via CQL."""
    results = _fetcher(ctx).search(cql, limit=limit)
    echo_lines([result.to_summary_line() for result in results])


@main.command("children")
@click.argument("page_id")
@limit_option
@click.pass_context
def children_command(ctx: click.Context, page_id: str, limit: int) -> None:
    """List child pages."""
    pages = _fetcher(ctx).get_page_children(page_id, limit=limit)
    echo_lines([page.to_summary_line() for page in pages])


add_help_command(main)


if __name__ == "__main__":
    main()
