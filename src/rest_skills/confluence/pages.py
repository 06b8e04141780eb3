"""Module for Confluence page operations."""

import logging
from typing import Any

from ..models.confluence import ConfluencePage
from ..models.constants import CONFLUENCE_STATUS_CURRENT, CONFLUENCE_STORAGE_FORMAT
from ..utils.decorators import check_write_access
from .client import API_V2, ConfluenceClient

logger = logging.getLogger("rest-skills.confluence")


def _storage_body(content: str) -> dict[str, str]:
    return {"representation": CONFLUENCE_STORAGE_FORMAT, "value": content}


class PagesMixin(ConfluenceClient):
    """Mixin for Confluence page operations."""

    def get_page_data(self, page_id: str) -> dict[str, Any]:
        """
        Get the raw API representation of a page, storage body included.

        Args:
            page_id: The ID of the page to retrieve

        Returns:
            The page as returned by the v2 API
        """
        return self._request_json(
            "GET",
            f"{API_V2}/pages/{page_id}",
            params={"body-format": CONFLUENCE_STORAGE_FORMAT},
        )

    def get_page(self, page_id: str) -> ConfluencePage:
        """Get a page as a ConfluencePage model."""
        return ConfluencePage.from_api_response(self.get_page_data(page_id))

    def get_page_children(self, page_id: str, limit: int = 25) -> list[ConfluencePage]:
        """
        List the direct child pages of a page.

        Args:
            page_id: The ID of the parent page
            limit: Maximum number of children to return

        Returns:
            List of ConfluencePage models, without bodies
        """
        data = self._request_json(
            "GET", f"{API_V2}/pages/{page_id}/children", params={"limit": limit}
        )
        return [
            ConfluencePage.from_api_response(item) for item in data.get("results", [])
        ]

    @check_write_access
    def create_page(
        self,
        space_id: str,
        title: str,
        body: str,
        *,
        parent_id: str | None = None,
    ) -> ConfluencePage:
        """
        Create a page in a space.

        Args:
            space_id: The numeric ID of the space
            title: The page title
            body: The page body in storage format
            parent_id: Optional ID of the parent page (keyword-only)

        Returns:
            The created page
        """
        payload: dict[str, Any] = {
            "spaceId": space_id,
            "status": CONFLUENCE_STATUS_CURRENT,
            "title": title,
            "body": _storage_body(body),
        }
        if parent_id:
            payload["parentId"] = parent_id

        data = self._request_json("POST", f"{API_V2}/pages", payload=payload)
        page = ConfluencePage.from_api_response(data)
        logger.info(f"Created page {page.id} in space {space_id}")
        return page

    @check_write_access
    def update_page(self, page_id: str, title: str, body: str) -> ConfluencePage:
        """
        Replace the title and body of a page.

        The current page is fetched first to learn its version number and
        space; the update is submitted as the next version. A concurrent edit
        makes the API reject the request with a conflict, which is not
        retried.

        Args:
            page_id: The ID of the page to update
            title: The new title
            body: The new body in storage format

        Returns:
            The updated page, with its version set to the submitted number
        """
        current = self.get_page(page_id)
        new_version = current.version + 1

        payload = {
            "id": page_id,
            "status": CONFLUENCE_STATUS_CURRENT,
            "title": title,
            "spaceId": current.space_id,
            "body": _storage_body(body),
            "version": {"number": new_version},
        }
        data = self._request_json("PUT", f"{API_V2}/pages/{page_id}", payload=payload)
        page = ConfluencePage.from_api_response(data)
        logger.info(f"Updated page {page_id} to version {new_version}")
        return page.model_copy(update={"id": page_id, "version": new_version})

    @check_write_access
    def delete_page(self, page_id: str) -> None:
        """
        Move a page to the trash.

        Args:
            page_id: The ID of the page to delete
        """
        self._request("DELETE", f"{API_V2}/pages/{page_id}")
        logger.info(f"Trashed page {page_id}")
