"""
URL building: the `compose` filter for query strings and pretty URLs, plus
the collaborators that enumerate, fetch and write a static mirror of a site.
"""

from .application.services.page_body_fetcher import PageBodyFetcher
from .application.services.static_site_builder import (
    StaticSiteBuilder,
    derive_output_path,
)
from .application.services.url_composer import compose
from .application.services.url_enumerator import UrlEnumerator
from .domain.exceptions import (
    ConfigurationError,
    InvalidStatusError,
    InvalidUrlError,
    UrlBuilderError,
)
from .domain.value_objects import REMOVE, AddToSet, Pull, StaticSiteReport

__all__ = [
    "compose",
    "AddToSet",
    "Pull",
    "REMOVE",
    "UrlEnumerator",
    "PageBodyFetcher",
    "StaticSiteBuilder",
    "StaticSiteReport",
    "derive_output_path",
    "UrlBuilderError",
    "ConfigurationError",
    "InvalidUrlError",
    "InvalidStatusError",
]
