"""
Constants and default values for model conversions.

Single source of truth for the fallbacks used when an API response omits
a field.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"

#
# Gist defaults
#
GIST_DEFAULT_ID = EMPTY_STRING
GIST_NO_DESCRIPTION = "(no description)"

#
# Confluence defaults
#
CONFLUENCE_DEFAULT_ID = "0"
CONFLUENCE_EMPTY_PAGE = "(empty page)"
CONFLUENCE_STORAGE_FORMAT = "storage"
CONFLUENCE_STATUS_CURRENT = "current"
