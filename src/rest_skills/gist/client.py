"""Base client module for GitHub Gist API interactions."""

import logging
from typing import Any

from requests import Session

from ..utils.http import api_request, decode_json
from ..utils.logging import log_config_param
from .config import GistConfig

logger = logging.getLogger("rest-skills.gist")


class GistClient:
    """Base client for Gist API interactions."""

    def __init__(
        self, config: GistConfig | None = None, session: Session | None = None
    ) -> None:
        """Initialize the Gist client with given or environment config.

        Args:
            config: Configuration for the Gist client. If None, will load from
                environment.
            session: Optional requests session to reuse

        Raises:
            ConfigurationError: If GITHUB_TOKEN cannot be resolved
        """
        self.config = config or GistConfig.from_env()
        self.session = session or Session()
        self.session.headers.update(self.config.headers)

        log_config_param(logger, "Gist", "API URL", self.config.api_url)
        log_config_param(logger, "Gist", "Token", self.config.token, sensitive=True)

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> str:
        """Send one request to the Gist API and return the body text."""
        return api_request(
            self.session,
            method,
            self.config.api_url,
            endpoint,
            params=params,
            payload=payload,
        )

    def _request_json(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> Any:
        """Send one request to the Gist API and decode the JSON body."""
        text = self._request(method, endpoint, params=params, payload=payload)
        return decode_json(text, method, endpoint, params)
