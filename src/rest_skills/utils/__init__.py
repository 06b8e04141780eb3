"""
Utility functions for the rest-skills tools.
This package provides helpers shared by the Gist and Confluence skills.
"""

from .decorators import check_write_access
from .environment import resolve_credentials
from .http import api_request, decode_json, extract_error_message
from .io import is_read_only_mode, read_stdin_content
from .logging import log_config_param, mask_sensitive, setup_logging
from .urls import is_atlassian_cloud_url, join_url

__all__ = [
    "api_request",
    "check_write_access",
    "decode_json",
    "extract_error_message",
    "is_atlassian_cloud_url",
    "is_read_only_mode",
    "join_url",
    "log_config_param",
    "mask_sensitive",
    "read_stdin_content",
    "resolve_credentials",
    "setup_logging",
]
