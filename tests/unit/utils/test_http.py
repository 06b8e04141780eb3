"""Tests for the single-request HTTP helper."""

from unittest.mock import MagicMock

import pytest
import requests
from fixtures.fake_http import make_response

from rest_skills.exceptions import RemoteError
from rest_skills.utils.http import (
    api_request,
    decode_json,
    display_endpoint,
    extract_error_message,
)


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestExtractErrorMessage:
    """Tests for extract_error_message."""

    def test_message_field(self):
        assert extract_error_message('{"message": "Not Found"}') == "Not Found"

    def test_first_error_message(self):
        body = '{"message": "", "errors": [{"message": "files can\'t be blank"}]}'
        assert extract_error_message(body) == "files can't be blank"

    def test_first_error_title(self):
        body = '{"errors": [{"status": 404, "title": "Not Found"}]}'
        assert extract_error_message(body) == "Not Found"

    def test_error_message_field(self):
        body = '{"errorMessage": "Permission denied"}'
        assert extract_error_message(body) == "Permission denied"

    def test_message_wins_over_errors(self):
        body = '{"message": "Top", "errors": [{"message": "Nested"}]}'
        assert extract_error_message(body) == "Top"

    def test_non_json_body_returned_as_is(self):
        assert extract_error_message("<html>Bad Gateway</html>\n") == "<html>Bad Gateway</html>"

    def test_nothing_usable(self):
        assert extract_error_message("") is None
        assert extract_error_message('{"status": 500}') is None
        assert extract_error_message("[1, 2]") is None


def test_display_endpoint():
    assert display_endpoint("/gists") == "/gists"
    assert display_endpoint("/gists", {"per_page": 30, "page": 1}) == "/gists?per_page=30&page=1"


def test_api_request_returns_body(session):
    """A successful call returns the body text."""
    session.request.return_value = make_response(200, {"id": "abc"})

    body = api_request(
        session,
        "PATCH",
        "https://api.github.com",
        "/gists/abc",
        payload={"description": "x"},
    )

    assert body == '{"id": "abc"}'
    session.request.assert_called_once_with(
        "PATCH",
        "https://api.github.com/gists/abc",
        params=None,
        json={"description": "x"},
        headers=None,
    )


def test_api_request_absolute_url(session):
    """Absolute URLs are requested unchanged."""
    session.request.return_value = make_response(200, "raw text")
    raw_url = "https://gist.githubusercontent.com/octocat/abc/raw/big.txt"

    assert api_request(session, "GET", "https://api.github.com", raw_url) == "raw text"
    assert session.request.call_args.args[1] == raw_url


def test_api_request_404_raises_with_endpoint(session):
    """A 404 raises a RemoteError naming the endpoint."""
    session.request.return_value = make_response(404, {"message": "Not Found"})

    with pytest.raises(RemoteError) as exc_info:
        api_request(session, "GET", "https://api.github.com", "/gists/missing")

    error = exc_info.value
    assert error.status_code == 404
    assert error.method == "GET"
    assert error.endpoint == "/gists/missing"
    assert error.message == "Not Found"
    assert "/gists/missing" in str(error)
    assert str(error) == "HTTP 404 - GET /gists/missing"


def test_api_request_error_includes_query(session):
    session.request.return_value = make_response(401, {"message": "Bad credentials"})

    with pytest.raises(RemoteError, match=r"HTTP 401 - GET /gists\?per_page=30&page=1"):
        api_request(
            session,
            "GET",
            "https://api.github.com",
            "/gists",
            params={"per_page": 30, "page": 1},
        )


@pytest.mark.parametrize("status", [400, 403, 409, 500, 503])
def test_api_request_any_error_status_raises(session, status):
    session.request.return_value = make_response(status, "")

    with pytest.raises(RemoteError) as exc_info:
        api_request(session, "DELETE", "https://example.atlassian.net", "/wiki/api/v2/pages/1")

    assert exc_info.value.status_code == status
    assert exc_info.value.message == "Unknown error"


def test_api_request_3xx_is_not_an_error(session):
    session.request.return_value = make_response(304, "")
    assert api_request(session, "GET", "https://api.github.com", "/gists") == ""


def test_api_request_transport_error(session):
    """Connection failures surface as a RemoteError without a status."""
    session.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(RemoteError) as exc_info:
        api_request(session, "GET", "https://api.github.com", "/gists")

    assert exc_info.value.status_code is None
    assert str(exc_info.value) == "request failed - GET /gists"
    assert "connection refused" in exc_info.value.message


def test_decode_json():
    assert decode_json("", "DELETE", "/gists/abc") == {}
    assert decode_json("  ", "DELETE", "/gists/abc") == {}
    assert decode_json('{"a": 1}', "GET", "/gists/abc") == {"a": 1}
    assert decode_json("[1]", "GET", "/gists") == [1]


def test_decode_json_rejects_html_body():
    with pytest.raises(RemoteError) as exc_info:
        decode_json(
            "<html>Log in</html>", "GET", "/wiki/api/v2/spaces", {"limit": 25}
        )

    assert exc_info.value.status_code is None
    assert exc_info.value.endpoint == "/wiki/api/v2/spaces?limit=25"
    assert exc_info.value.message == "Response body is not valid JSON"
