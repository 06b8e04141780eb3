"""
Pydantic models for the GitHub Gist and Confluence API payloads.

The models only shape remote resources for display; nothing is persisted.
"""

from .base import ApiModel, TimestampMixin
from .confluence import ConfluencePage, ConfluenceSearchResult, ConfluenceSpace
from .gist import Gist, GistFile

__all__ = [
    "ApiModel",
    "TimestampMixin",
    "Gist",
    "GistFile",
    "ConfluencePage",
    "ConfluenceSearchResult",
    "ConfluenceSpace",
]
