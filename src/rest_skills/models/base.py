"""
Base models for the Gist and Confluence API models.

Every model converts a raw API payload with ``from_api_response`` and
renders the one-line summary printed by the list-style commands.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_summary_line(self) -> str:
        """Render the model as one line of command output."""
        raise NotImplementedError("Subclasses must implement to_summary_line")


class TimestampMixin:
    """
    Mixin for handling the ISO 8601 timestamps returned by the APIs.
    """

    @staticmethod
    def date_part(timestamp: str | None) -> str:
        """
        Return the calendar date of an ISO 8601 timestamp.

        Args:
            timestamp: A timestamp such as ``2024-01-01T10:00:00Z``

        Returns:
            The ``YYYY-MM-DD`` part, or an empty string if the input is empty
        """
        if not timestamp:
            return EMPTY_STRING
        return timestamp.split("T")[0]
