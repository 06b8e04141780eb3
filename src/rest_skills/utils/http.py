"""Single-request HTTP helper shared by the Gist and Confluence clients."""

import json
import logging
from typing import Any
from urllib.parse import urlencode

import requests

from ..exceptions import RemoteError
from .urls import join_url

logger = logging.getLogger("rest-skills.utils.http")


def extract_error_message(body: str) -> str | None:
    """Pull a human-readable message out of an API error body.

    Looks at ``message``, ``errors[0].message``, ``errors[0].title`` and
    ``errorMessage`` in that order. A body that is not JSON is returned
    as-is.

    Args:
        body: The raw response body

    Returns:
        The extracted message, or None if nothing usable was found
    """
    if not body or not body.strip():
        return None

    try:
        data = json.loads(body)
    except ValueError:
        return body.strip()

    if not isinstance(data, dict):
        return None

    if data.get("message"):
        return str(data["message"])

    errors = data.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]
        if first.get("message"):
            return str(first["message"])
        if first.get("title"):
            return str(first["title"])

    if data.get("errorMessage"):
        return str(data["errorMessage"])

    return None


def display_endpoint(endpoint: str, params: dict[str, Any] | None = None) -> str:
    """Render an endpoint with its query string for error reporting."""
    if not params:
        return endpoint
    return f"{endpoint}?{urlencode(params)}"


def api_request(
    session: requests.Session,
    method: str,
    base_url: str,
    endpoint: str,
    *,
    params: dict[str, Any] | None = None,
    payload: Any = None,
    headers: dict[str, str] | None = None,
) -> str:
    """Perform exactly one HTTP request and return the response body.

    Args:
        session: Session carrying the authentication for the target API
        method: HTTP method (GET, POST, PUT, PATCH, DELETE)
        base_url: API root the endpoint is joined onto
        endpoint: API path, or an absolute URL requested as-is
        params: Optional query parameters
        payload: Optional JSON-serializable request body
        headers: Optional extra headers for this request

    Returns:
        The response body as text

    Raises:
        RemoteError: If the request fails or the status code is >= 400
    """
    url = join_url(base_url, endpoint)
    shown = display_endpoint(endpoint, params)
    logger.debug(f"{method} {url} params={params}")

    try:
        response = session.request(
            method,
            url,
            params=params,
            json=payload,
            headers=headers,
        )
    except requests.RequestException as e:
        logger.debug(f"Transport error for {method} {shown}: {e}")
        raise RemoteError(method, shown, message=str(e)) from e

    logger.debug(f"{method} {shown} -> {response.status_code}")

    if response.status_code >= 400:
        raise RemoteError(
            method,
            shown,
            status_code=response.status_code,
            message=extract_error_message(response.text),
        )

    return response.text


def decode_json(
    text: str,
    method: str,
    endpoint: str,
    params: dict[str, Any] | None = None,
) -> Any:
    """Decode a JSON response body, treating an empty body as ``{}``.

    Args:
        text: The response body
        method: HTTP method of the request, for error reporting
        endpoint: API path of the request, for error reporting
        params: Query parameters of the request, for error reporting

    Raises:
        RemoteError: If a non-empty body is not JSON, e.g. a login page
            served by an SSO proxy
    """
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError as e:
        shown = display_endpoint(endpoint, params)
        logger.debug(f"Undecodable body for {method} {shown}: {text[:200]!r}")
        raise RemoteError(
            method, shown, message="Response body is not valid JSON"
        ) from e
