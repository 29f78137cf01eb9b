"""
Constants module for the URL builder.

This module centralizes magic numbers and strings into named constants
with clear meanings.
"""

# =============================================================================
# URL SYNTAX
# =============================================================================

PATH_SEPARATOR = "/"
QUERY_SEPARATOR = "?"
FRAGMENT_SEPARATOR = "#"

# Directive keys accepted when overrides arrive as plain mappings (JSON, templates)
ADD_TO_SET_KEYS = ("addToSet", "$addToSet")
PULL_KEYS = ("pull", "$pull")

# =============================================================================
# HTTP CONSTANTS
# =============================================================================

# Only this status is accepted when fetching bodies for a static build
HTTP_SUCCESS_STATUS = 200

DEFAULT_FETCH_TIMEOUT_SECONDS = 30

# =============================================================================
# STATIC SITE CONSTANTS
# =============================================================================

DEFAULT_LOCALE = "en"
DEFAULT_DOCUMENT_EXTENSION = ".html"
DEFAULT_INDEX_DOCUMENT = "index.html"

# =============================================================================
# QUERY STRING CONSTANTS
# =============================================================================

# Bracket segments split off a query key; the rest stays one literal segment
MAX_QUERY_KEY_DEPTH = 5
