"""Configuration module for the Confluence client."""

import logging
import os
from dataclasses import dataclass

from ..utils.environment import resolve_credentials
from ..utils.urls import is_atlassian_cloud_url

logger = logging.getLogger("rest-skills.confluence.config")

REQUIRED_VARIABLES = ("CONFLUENCE_URL", "CONFLUENCE_EMAIL", "CONFLUENCE_API_TOKEN")


def normalize_site_url(url: str) -> str:
    """Strip the trailing slash and ``/wiki`` suffix from a site URL.

    Endpoints are built as ``{site}/wiki/...``, so both
    ``https://acme.atlassian.net`` and ``https://acme.atlassian.net/wiki/``
    resolve to the same site root.
    """
    url = url.strip().rstrip("/")
    if url.endswith("/wiki"):
        url = url[: -len("/wiki")]
    return url


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence Cloud API configuration.

    Authentication is HTTP Basic with the account email and an API token.
    """

    url: str  # Site root, e.g. https://your-domain.atlassian.net
    email: str  # Atlassian account email
    api_token: str  # API token used as password

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if the site is hosted on atlassian.net
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(
        cls, env_file: str | os.PathLike | None = None
    ) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Fallback .env file consulted when a variable is unset

        Returns:
            ConfluenceConfig with values from the environment

        Raises:
            ConfigurationError: If any required variable cannot be resolved
        """
        values = resolve_credentials(REQUIRED_VARIABLES, env_file)
        config = cls(
            url=normalize_site_url(values["CONFLUENCE_URL"]),
            email=values["CONFLUENCE_EMAIL"],
            api_token=values["CONFLUENCE_API_TOKEN"],
        )
        if not config.is_cloud:
            logger.warning(
                f"{config.url} does not look like an Atlassian Cloud site; "
                "the v2 REST API is only available on Confluence Cloud."
            )
        return config
