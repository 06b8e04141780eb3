"""I/O utility functions for rest-skills."""

import os
from typing import TextIO

import click

from ..exceptions import ConfigurationError


def is_read_only_mode() -> bool:
    """Check if the tools are running in read-only mode.

    Read-only mode rejects every command that creates, modifies or deletes
    a remote resource while leaving the read commands available.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    value = os.getenv("READ_ONLY_MODE", "false")
    return value.lower() in ("true", "1", "yes", "y", "on")


def read_stdin_content(stream: TextIO | None = None, hint: str | None = None) -> str:
    """Read a content body piped on standard input.

    Trailing newlines are dropped, matching shell command substitution.

    Args:
        stream: Stream to read from (defaults to click's stdin stream)
        hint: Extra sentence appended to the error message

    Returns:
        The piped content

    Raises:
        ConfigurationError: If nothing was piped in
    """
    stream = stream or click.get_text_stream("stdin")
    content = stream.read().rstrip("\n")
    if not content:
        message = "No content on stdin."
        if hint:
            message = f"{message} {hint}"
        raise ConfigurationError(message)
    return content
