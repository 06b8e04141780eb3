"""Module for Confluence space operations."""

import logging

from ..models.confluence import ConfluencePage, ConfluenceSpace
from .client import API_V2, ConfluenceClient

logger = logging.getLogger("rest-skills.confluence")


class SpacesMixin(ConfluenceClient):
    """Mixin for Confluence space operations."""

    def list_spaces(self, limit: int = 25) -> list[ConfluenceSpace]:
        """
        List the spaces visible to the user.

        Args:
            limit: Maximum number of spaces to return

        Returns:
            List of ConfluenceSpace models
        """
        data = self._request_json("GET", f"{API_V2}/spaces", params={"limit": limit})
        return [
            ConfluenceSpace.from_api_response(item) for item in data.get("results", [])
        ]

    def list_space_pages(self, space_id: str, limit: int = 25) -> list[ConfluencePage]:
        """
        List the pages of a space.

        Args:
            space_id: The numeric ID of the space
            limit: Maximum number of pages to return

        Returns:
            List of ConfluencePage models, without bodies
        """
        data = self._request_json(
            "GET", f"{API_V2}/spaces/{space_id}/pages", params={"limit": limit}
        )
        return [
            ConfluencePage.from_api_response(item) for item in data.get("results", [])
        ]
