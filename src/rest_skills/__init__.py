"""Command-line CRUD skills for GitHub Gists and Confluence Cloud.

Two console scripts are installed:

- ``gist``: list, read, create, edit and delete gists and their files
- ``confluence``: list spaces and pages, read, create, update, delete and
  search pages
"""

from .exceptions import ConfigurationError, RemoteError, RestSkillsError

__version__ = "0.1.0"

__all__ = ["ConfigurationError", "RemoteError", "RestSkillsError", "__version__"]
