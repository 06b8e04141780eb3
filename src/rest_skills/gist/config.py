"""Configuration module for the Gist client."""

import os
from dataclasses import dataclass

from ..utils.environment import resolve_credentials

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class GistConfig:
    """GitHub Gist API configuration.

    Authentication is a personal access token with the ``gist`` scope sent
    as a bearer token.
    """

    token: str  # Token with 'gist' scope
    api_url: str = GITHUB_API_URL  # REST API root
    api_version: str = GITHUB_API_VERSION  # X-GitHub-Api-Version header

    @classmethod
    def from_env(cls, env_file: str | os.PathLike | None = None) -> "GistConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Fallback .env file consulted when GITHUB_TOKEN is unset

        Returns:
            GistConfig with values from the environment

        Raises:
            ConfigurationError: If GITHUB_TOKEN cannot be resolved
        """
        values = resolve_credentials(["GITHUB_TOKEN"], env_file)
        return cls(token=values["GITHUB_TOKEN"])

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every Gist API request."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.api_version,
        }
