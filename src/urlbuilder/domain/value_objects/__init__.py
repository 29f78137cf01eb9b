"""
Domain Value Objects

Override directives, split URLs and build reports.
"""

from .directives import (
    REMOVE,
    AddToSet,
    Pull,
    Remove,
    coerce_directive,
    coerce_overrides,
    is_empty,
)
from .static_site_report import StaticSiteReport
from .url_parts import SplitUrl

__all__ = [
    "AddToSet",
    "Pull",
    "Remove",
    "REMOVE",
    "is_empty",
    "coerce_directive",
    "coerce_overrides",
    "SplitUrl",
    "StaticSiteReport",
]
