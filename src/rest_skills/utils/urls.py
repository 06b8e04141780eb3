"""URL-related utility functions for rest-skills."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str) -> bool:
    """Determine if a URL belongs to Atlassian Cloud.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False otherwise
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private network addresses are never Cloud
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return ".atlassian.net" in hostname or ".jira.com" in hostname


def is_absolute_url(value: str) -> bool:
    """Return True for a full http(s) URL rather than an API path."""
    return urlparse(value).scheme in ("http", "https")


def join_url(base_url: str, endpoint: str) -> str:
    """Join an API path onto a base URL.

    Absolute URLs are returned unchanged.
    """
    if is_absolute_url(endpoint):
        return endpoint
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
