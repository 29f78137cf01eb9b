"""
Data models for the URL builder.

This module contains the Pydantic models exchanged with URL enumeration
handlers.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.constants import DEFAULT_LOCALE


class RequestContext(BaseModel):
    """What a URL enumeration handler needs to know about the request."""

    locale: str = Field(default=DEFAULT_LOCALE, description="Locale to enumerate")
    static: bool = Field(
        default=False,
        description="True while building a static site; handlers may omit "
        "URLs that only make sense on a live server",
    )

    @field_validator("locale")
    def locale_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Locale cannot be empty")
        return v


class UrlMetadata(BaseModel):
    """
    One reachable URL.

    `type`, `id` and `document_id` are only set when the URL represents a
    particular document. `localization_id` is always set and is the same for
    localized versions of the same URL; for the main view of a document it
    equals `document_id`. Handlers may attach further fields (for example
    `changefreq` or `priority` for sitemaps).
    """

    model_config = ConfigDict(extra="allow")

    url: str = Field(description="Absolute URL")
    type: Optional[str] = Field(default=None, description="Content type name")
    id: Optional[str] = Field(default=None, description="Document id")
    document_id: Optional[str] = Field(
        default=None, description="Id shared by every locale of the document"
    )
    localization_id: str = Field(
        description="Id stable across localized versions of this URL"
    )

    @field_validator("url")
    def url_not_blank(cls, v: Any) -> str:
        if not str(v).strip():
            raise ValueError("URL cannot be empty")
        return str(v)
