"""Credential resolution from the environment and a local .env file."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dotenv import load_dotenv

from ..exceptions import ConfigurationError

logger = logging.getLogger("rest-skills.utils.environment")

DEFAULT_ENV_FILE = ".env"


def _missing(names: Iterable[str]) -> list[str]:
    return [name for name in names if not os.getenv(name)]


def resolve_credentials(
    names: Iterable[str], env_file: str | os.PathLike | None = None
) -> dict[str, str]:
    """Resolve required credentials, falling back to a .env file.

    The process environment is checked first. When any required value is
    missing, every entry of the fallback file is exported into the
    environment (values already set are left untouched) and the names are
    checked again.

    Args:
        names: Environment variable names that must be set
        env_file: Path of the fallback file. Defaults to ``.env`` in the
            current working directory.

    Returns:
        Mapping of each required name to its value

    Raises:
        ConfigurationError: If a variable is still unset after the fallback
    """
    names = list(names)
    missing = _missing(names)

    if missing:
        path = Path(env_file) if env_file else Path.cwd() / DEFAULT_ENV_FILE
        if path.is_file():
            logger.debug(f"Loading fallback credentials from {path}")
            load_dotenv(path, override=False)
            missing = _missing(names)
        else:
            logger.debug(f"No fallback credentials file at {path}")

    if missing:
        raise ConfigurationError(
            f"{missing[0]} not set. Export it or add it to .env."
        )

    return {name: os.environ[name] for name in names}
