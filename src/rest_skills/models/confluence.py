"""
Confluence models.
This module provides Pydantic models for the Confluence v2 pages and spaces
resources and for CQL search hits.
"""

from typing import Any

from .base import ApiModel
from .constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_EMPTY_PAGE,
    CONFLUENCE_STATUS_CURRENT,
    EMPTY_STRING,
    UNKNOWN,
)


class ConfluenceSpace(ApiModel):
    """
    Model representing a Confluence space.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    status: str = CONFLUENCE_STATUS_CURRENT

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSpace":
        """
        Create a ConfluenceSpace from a Confluence API response.

        Args:
            data: The space data from the Confluence API

        Returns:
            A ConfluenceSpace instance
        """
        if not data:
            return cls()

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            key=data.get("key") or EMPTY_STRING,
            name=data.get("name") or UNKNOWN,
            status=data.get("status") or CONFLUENCE_STATUS_CURRENT,
        )

    def to_summary_line(self) -> str:
        return f"{self.id}  {self.key}  {self.name}  {self.status}"


class ConfluencePage(ApiModel):
    """
    Model representing a Confluence page as returned by the v2 API.

    Only the storage representation of the body is kept.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    status: str = CONFLUENCE_STATUS_CURRENT
    title: str = EMPTY_STRING
    space_id: str | None = None
    parent_id: str | None = None
    version: int = 0
    body: str | None = None
    url: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluencePage":
        """
        Create a ConfluencePage from a Confluence API response.

        Args:
            data: The page data from the Confluence API

        Returns:
            A ConfluencePage instance
        """
        if not data:
            return cls()

        storage = ((data.get("body") or {}).get("storage")) or {}
        links = data.get("_links") or {}
        space_id = data.get("spaceId")
        parent_id = data.get("parentId")

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            status=data.get("status") or CONFLUENCE_STATUS_CURRENT,
            title=data.get("title") or EMPTY_STRING,
            space_id=str(space_id) if space_id is not None else None,
            parent_id=str(parent_id) if parent_id is not None else None,
            version=int((data.get("version") or {}).get("number") or 0),
            body=storage.get("value"),
            url=(links.get("base") or EMPTY_STRING) + (links.get("webui") or EMPTY_STRING),
        )

    @property
    def body_or_placeholder(self) -> str:
        """Storage body, or a placeholder for a page without content."""
        return self.body or CONFLUENCE_EMPTY_PAGE

    def to_summary_line(self) -> str:
        return f"{self.id}  {self.status}  {self.title}"


class ConfluenceSearchResult(ApiModel):
    """
    Model representing one hit of a CQL search.

    Content hits nest the page or blog post under ``content``; other hits
    (spaces, users) only carry top-level fields.
    """

    id: str = EMPTY_STRING
    type: str = EMPTY_STRING
    title: str = EMPTY_STRING
    space_key: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResult":
        """
        Create a ConfluenceSearchResult from one entry of ``results``.

        Args:
            data: The search hit from the Confluence search API

        Returns:
            A ConfluenceSearchResult instance
        """
        if not data:
            return cls()

        content = data.get("content") or {}
        space = content.get("space") or {}

        return cls(
            id=str(content.get("id") or data.get("id") or EMPTY_STRING),
            type=content.get("type") or data.get("type") or EMPTY_STRING,
            title=content.get("title") or data.get("title") or EMPTY_STRING,
            space_key=space.get("key") or EMPTY_STRING,
        )

    def to_summary_line(self) -> str:
        return f"{self.id}  {self.type}  {self.title}  [{self.space_key}]"
