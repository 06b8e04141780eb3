"""Module for gist-level operations."""

import logging
import re
from typing import Any

from ..models.gist import Gist
from ..utils.decorators import check_write_access
from .client import GistClient

logger = logging.getLogger("rest-skills.gist")

SEARCH_PAGE_SIZE = 100


class GistsMixin(GistClient):
    """Mixin for listing, creating and deleting gists."""

    def list_gists(self, per_page: int = 30, page: int = 1) -> list[Gist]:
        """
        List the authenticated user's gists.

        Args:
            per_page: Number of gists per page
            page: Page number to fetch

        Returns:
            List of Gist models for the requested page
        """
        data = self._request_json(
            "GET", "/gists", params={"per_page": per_page, "page": page}
        )
        return [Gist.from_api_response(item) for item in data or []]

    def get_gist_data(self, gist_id: str) -> dict[str, Any]:
        """
        Get the raw API representation of a gist.

        Args:
            gist_id: The ID of the gist

        Returns:
            The gist as returned by the API, files and metadata included
        """
        return self._request_json("GET", f"/gists/{gist_id}")

    def get_gist(self, gist_id: str) -> Gist:
        """Get a gist as a Gist model."""
        return Gist.from_api_response(self.get_gist_data(gist_id))

    @check_write_access
    def create_gist(
        self, description: str, filename: str, content: str, *, public: bool = False
    ) -> Gist:
        """
        Create a gist holding a single file.

        Args:
            description: Description of the gist
            filename: Name of the file
            content: File content
            public: Whether the gist is public (keyword-only)

        Returns:
            The created gist
        """
        payload = {
            "description": description,
            "public": public,
            "files": {filename: {"content": content}},
        }
        data = self._request_json("POST", "/gists", payload=payload)
        gist = Gist.from_api_response(data)
        logger.info(f"Created gist {gist.id}")
        return gist

    @check_write_access
    def delete_gist(self, gist_id: str) -> None:
        """
        Delete a gist. This cannot be undone.

        Args:
            gist_id: The ID of the gist to delete
        """
        self._request("DELETE", f"/gists/{gist_id}")
        logger.info(f"Deleted gist {gist_id}")

    @check_write_access
    def update_description(self, gist_id: str, description: str) -> Gist:
        """
        Replace the description of a gist.

        Args:
            gist_id: The ID of the gist
            description: The new description

        Returns:
            The updated gist
        """
        data = self._request_json(
            "PATCH", f"/gists/{gist_id}", payload={"description": description}
        )
        return Gist.from_api_response(data)

    def search_gists(self, pattern: str) -> list[str]:
        """
        Search the user's gists by description and file names.

        Matching is done locally and case-insensitively over the first page
        of up to 100 gists. The pattern is a regular expression; an invalid
        expression is matched as plain text.

        Args:
            pattern: Pattern to look for

        Returns:
            The matching summary lines
        """
        gists = self.list_gists(per_page=SEARCH_PAGE_SIZE, page=1)
        lines = [gist.to_search_line() for gist in gists]

        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error:
            logger.debug(f"Pattern {pattern!r} is not a valid regex, matching literally")
            regex = re.compile(re.escape(pattern), re.IGNORECASE)

        return [line for line in lines if regex.search(line)]
