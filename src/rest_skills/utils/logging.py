"""Logging utilities for rest-skills.

Log records always go to stderr so that command output on stdout stays
machine-readable.
"""

import logging
import sys

APP_LOGGER_NAME = "rest-skills"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure rest-skills logging on the standard error stream.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    loggers = [APP_LOGGER_NAME, "rest-skills.gist", "rest-skills.confluence"]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

    return logging.getLogger(APP_LOGGER_NAME)


def level_from_verbosity(verbose: int, env: dict[str, str]) -> int:
    """Map a ``-v`` count and the verbosity env vars to a logging level.

    Args:
        verbose: Number of ``-v`` flags given on the command line
        env: Environment mapping to read REST_SKILLS_(VERY_)VERBOSE from

    Returns:
        The logging level to use
    """
    if verbose == 1:
        return logging.INFO
    if verbose >= 2:
        return logging.DEBUG
    if env.get("REST_SKILLS_VERY_VERBOSE", "false").lower() in ("true", "1", "yes"):
        return logging.DEBUG
    if env.get("REST_SKILLS_VERBOSE", "false").lower() in ("true", "1", "yes"):
        return logging.INFO
    return logging.WARNING


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking if sensitive.

    Args:
        logger: The logger to use
        service: The service name (Gist or Confluence)
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
