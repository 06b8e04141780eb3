import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from ..exceptions import ConfigurationError
from .io import is_read_only_mode

logger = logging.getLogger("rest-skills.utils.decorators")

F = TypeVar("F", bound=Callable[..., Any])


def check_write_access(func: F) -> F:
    """
    Decorator for client operations that modify remote resources.
    If read-only mode is enabled, it raises a ConfigurationError instead of
    calling the wrapped operation.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if is_read_only_mode():
            operation = func.__name__
            action_description = operation.replace(
                "_", " "
            )  # e.g., "create_page" -> "create page"
            logger.warning(f"Attempted to call '{operation}' in read-only mode.")
            raise ConfigurationError(f"Cannot {action_description} in read-only mode.")

        return func(*args, **kwargs)

    return wrapper  # type: ignore
