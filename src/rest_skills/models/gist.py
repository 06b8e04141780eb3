"""
GitHub Gist models.
This module provides Pydantic models for gists and the files they hold.
"""

from typing import Any

from pydantic import Field

from .base import ApiModel, TimestampMixin
from .constants import EMPTY_STRING, GIST_DEFAULT_ID, GIST_NO_DESCRIPTION


class GistFile(ApiModel):
    """
    Model representing one file of a gist.
    """

    filename: str = EMPTY_STRING
    content: str | None = None
    truncated: bool = False
    raw_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "GistFile":
        """
        Create a GistFile from a gist ``files`` entry.

        Args:
            data: The file data from the Gist API
            **kwargs: ``filename`` is used when the entry lacks one

        Returns:
            A GistFile instance
        """
        if not data:
            return cls(filename=kwargs.get("filename", EMPTY_STRING))

        return cls(
            filename=data.get("filename") or kwargs.get("filename", EMPTY_STRING),
            content=data.get("content"),
            truncated=bool(data.get("truncated", False)),
            raw_url=data.get("raw_url"),
        )

    @property
    def needs_raw_fetch(self) -> bool:
        """True when the inline content is cut off and a raw URL is available."""
        return self.truncated and bool(self.raw_url)


class Gist(ApiModel, TimestampMixin):
    """
    Model representing a gist and its files.
    """

    id: str = GIST_DEFAULT_ID
    description: str | None = None
    public: bool = False
    updated_at: str | None = None
    html_url: str | None = None
    files: dict[str, GistFile] = Field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Gist":
        """
        Create a Gist from a Gist API response.

        Args:
            data: The gist data from the Gist API

        Returns:
            A Gist instance
        """
        if not data:
            return cls()

        files = {
            name: GistFile.from_api_response(file_data or {}, filename=name)
            for name, file_data in (data.get("files") or {}).items()
        }

        return cls(
            id=str(data.get("id", GIST_DEFAULT_ID)),
            description=data.get("description"),
            public=bool(data.get("public", False)),
            updated_at=data.get("updated_at"),
            html_url=data.get("html_url"),
            files=files,
        )

    @property
    def file_names(self) -> list[str]:
        """File names in sorted order."""
        return sorted(self.files)

    def to_summary_line(self) -> str:
        """Line printed by ``gist list``."""
        visibility = "public " if self.public else "secret"
        description = (
            self.description if self.description is not None else GIST_NO_DESCRIPTION
        )
        files = ", ".join(self.file_names)
        return f"{self.id}  {visibility}  {self.date_part(self.updated_at)}  {description}  [{files}]"

    def to_search_line(self) -> str:
        """Line printed and matched by ``gist search``."""
        files = ", ".join(self.file_names)
        return f"{self.id}  {self.description or EMPTY_STRING}  [{files}]"
