"""Base client module for Confluence API interactions."""

import logging
from typing import Any

from atlassian import Confluence

from ..utils.http import api_request, decode_json
from ..utils.logging import log_config_param
from .config import ConfluenceConfig

logger = logging.getLogger("rest-skills.confluence")

API_V2 = "/wiki/api/v2"
SEARCH_API = "/wiki/rest/api/search"


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Requests go through the basic-auth session owned by the
    ``atlassian.Confluence`` client, against the v2 REST endpoints.
    """

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ConfigurationError: If a required variable cannot be resolved
        """
        self.config = config or ConfluenceConfig.from_env()

        self.confluence = Confluence(
            url=self.config.url,
            username=self.config.email,
            password=self.config.api_token,  # API token is used as password
            cloud=True,
        )
        self.session = self.confluence._session
        self.session.headers.update(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )

        log_config_param(logger, "Confluence", "URL", self.config.url)
        log_config_param(logger, "Confluence", "Email", self.config.email)
        log_config_param(
            logger, "Confluence", "API Token", self.config.api_token, sensitive=True
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> str:
        """Send one request to the Confluence site and return the body text."""
        return api_request(
            self.session,
            method,
            self.config.url,
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
        """Send one request to the Confluence site and decode the JSON body."""
        text = self._request(method, endpoint, params=params, payload=payload)
        return decode_json(text, method, endpoint, params)
