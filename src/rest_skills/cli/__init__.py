"""Click command groups for the ``gist`` and ``confluence`` tools."""

from .confluence import main as confluence_main
from .gist import main as gist_main

__all__ = ["confluence_main", "gist_main"]
