"""Module for Confluence search operations."""

import logging

from ..models.confluence import ConfluenceSearchResult
from .client import SEARCH_API, ConfluenceClient

logger = logging.getLogger("rest-skills.confluence")


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    def search(self, cql: str, limit: int = 25) -> list[ConfluenceSearchResult]:
        """
        Search content using Confluence Query Language (CQL).

        Args:
            cql: Confluence Query Language string
            limit: Maximum number of results to return

        Returns:
            List of ConfluenceSearchResult models
        """
        logger.debug(f"Running CQL search: {cql}")
        data = self._request_json(
            "GET", SEARCH_API, params={"cql": cql, "limit": limit}
        )
        return [
            ConfluenceSearchResult.from_api_response(item)
            for item in data.get("results", [])
        ]
