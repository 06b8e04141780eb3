"""Shared pieces of the gist and confluence command groups."""

import json
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import click

from ..exceptions import RemoteError, RestSkillsError
from ..utils.logging import level_from_verbosity, setup_logging

logger = logging.getLogger("rest-skills.cli")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class SkillContext:
    """Per-invocation state shared by the subcommands of a group."""

    env_file: str | None
    factory: Callable[[str | None], Any]
    _fetcher: Any = field(default=None, repr=False)

    def fetcher(self) -> Any:
        """Build the API client on first use.

        Credentials are only resolved by commands that talk to the API, so
        ``help`` works without any configuration.
        """
        if self._fetcher is None:
            self._fetcher = self.factory(self.env_file)
        return self._fetcher


class SkillGroup(click.Group):
    """Click group reporting rest-skills errors as terminal failures.

    Usage errors keep click's own handling (usage text, exit code 2).
    """

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except RemoteError as e:
            logger.debug("Remote request failed", exc_info=True)
            click.echo(e.summary, err=True)
            click.echo(e.message, err=True)
            ctx.exit(1)
        except RestSkillsError as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"error: {e}", err=True)
            ctx.exit(1)


def configure_invocation(verbose: int, read_only: bool) -> None:
    """Apply the group-level options shared by both tools."""
    level = level_from_verbosity(verbose, dict(os.environ))
    setup_logging(level)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    if read_only:
        os.environ["READ_ONLY_MODE"] = "true"


def add_help_command(group: click.Group) -> None:
    """Register a ``help`` subcommand printing the group usage block."""

    @group.command("help")
    @click.pass_context
    def help_command(ctx: click.Context) -> None:
        """Show this message and exit."""
        click.echo(ctx.parent.get_help())


def common_options(func: Callable) -> Callable:
    """Options accepted by both command groups."""
    func = click.option(
        "--read-only",
        is_flag=True,
        help="Reject every command that modifies remote content",
    )(func)
    func = click.option(
        "--env-file",
        type=click.Path(dir_okay=False),
        help="Fallback .env file for missing credentials (default: ./.env)",
    )(func)
    func = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (can be used multiple times)",
    )(func)
    return func


def echo_json(data: Any) -> None:
    """Print an API payload as indented JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)
