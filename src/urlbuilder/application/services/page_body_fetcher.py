"""
This module contains the PageBodyFetcher, which renders a page of an ASGI
application without listening on a port.
"""

from typing import Any, Optional
from urllib.parse import urlsplit

import httpx

from src.core.constants import HTTP_SUCCESS_STATUS, PATH_SEPARATOR, QUERY_SEPARATOR
from src.logger import Logger
from src.settings import Settings, get_settings
from src.urlbuilder.domain.exceptions import (
    ConfigurationError,
    InvalidStatusError,
    InvalidUrlError,
)

logger = Logger(__name__)


class PageBodyFetcher:
    """
    Fetches page bodies by passing requests straight to the ASGI application
    through httpx's ASGI transport. Suitable for building static sites.

    Only URLs under the base URL and without a query string can be fetched,
    and only a 200 response is accepted; redirects are not followed.
    """

    def __init__(
        self,
        app: Any,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            app: The ASGI application serving the site.
            base_url: Absolute site URL. Defaults to the `base_url` setting.
            timeout_seconds: Per-request timeout. Defaults to the
                `fetch_timeout_seconds` setting.
            settings: Settings to read defaults from.
        """
        settings = settings or get_settings()
        self.app = app
        self.base_url = base_url.rstrip(PATH_SEPARATOR) if base_url else settings.base_url
        self.timeout_seconds = timeout_seconds or settings.fetch_timeout_seconds

    def relative_path(self, url: str) -> str:
        """
        Path of `url` relative to the base URL, as the application sees it.

        Raises:
            ConfigurationError: If no base URL is configured.
            InvalidUrlError: If `url` is outside the base URL or has a query string.
        """
        base_url = self.base_url
        if not base_url:
            raise ConfigurationError(
                "The base URL must be set to fetch page bodies", config_key="base_url"
            )
        if not url.startswith(base_url):
            raise InvalidUrlError(url, f"does not start with {base_url}")
        if QUERY_SEPARATOR in url:
            raise InvalidUrlError(
                url, "contains ? and cannot be part of a static site"
            )
        path = url[len(base_url):]
        if not path:
            return PATH_SEPARATOR
        if not path.startswith(PATH_SEPARATOR):
            raise InvalidUrlError(url, f"does not start with {base_url}")
        return path

    async def get_body(self, url: str) -> str:
        """
        Render `url` and return the response body.

        Raises:
            ConfigurationError: If no base URL is configured.
            InvalidUrlError: If `url` cannot be part of a static site.
            InvalidStatusError: If the application answers with anything but 200.
        """
        path = self.relative_path(url)
        origin = urlsplit(self.base_url)
        transport = httpx.ASGITransport(app=self.app)
        async with httpx.AsyncClient(
            transport=transport,
            base_url=f"{origin.scheme}://{origin.netloc}",
            timeout=self.timeout_seconds,
            follow_redirects=False,
        ) as client:
            logger.debug(f"Fetching {path} in-process for {url}")
            response = await client.get(path)

        if response.status_code != HTTP_SUCCESS_STATUS:
            raise InvalidStatusError(url, response.status_code)
        return response.text
