"""
This module contains the StaticSiteBuilder, which writes a static mirror of
a site by enumerating its URLs per locale and rendering each one in-process.
"""

import re
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import unquote

from src.core.constants import (
    DEFAULT_DOCUMENT_EXTENSION,
    DEFAULT_INDEX_DOCUMENT,
    PATH_SEPARATOR,
)
from src.logger import Logger
from src.models import RequestContext
from src.settings import Settings, get_settings
from src.urlbuilder.application.services.page_body_fetcher import PageBodyFetcher
from src.urlbuilder.application.services.url_enumerator import UrlEnumerator
from src.urlbuilder.domain.exceptions import (
    ConfigurationError,
    InvalidUrlError,
    wrap_exception,
)
from src.urlbuilder.domain.value_objects import StaticSiteReport

logger = Logger(__name__)

_EXTENSION_PATTERN = re.compile(r"\.\w+$")


def derive_output_path(
    url: str,
    base_url: str,
    extension: str = DEFAULT_DOCUMENT_EXTENSION,
    index_document: str = DEFAULT_INDEX_DOCUMENT,
) -> str:
    """
    Map a site URL to a path relative to the output directory.

    The site root and any URL ending in `/` get the index document; a path
    without an extension gets `extension` appended. Percent-escapes are
    decoded since the result names a file.

    >>> derive_output_path("https://example.com/about", "https://example.com")
    '/about.html'
    """
    if not url.startswith(base_url):
        raise InvalidUrlError(url, f"does not start with {base_url}")
    path = unquote(url[len(base_url):])
    if path in ("", PATH_SEPARATOR):
        return f"{PATH_SEPARATOR}{index_document}"
    if path.endswith(PATH_SEPARATOR):
        return f"{path}{index_document}"
    if not _EXTENSION_PATTERN.search(path):
        path += extension
    return path


class StaticSiteBuilder:
    """
    Builds a static site in a directory from an enumerator of URLs and a
    fetcher able to render them.
    """

    def __init__(
        self,
        enumerator: UrlEnumerator,
        fetcher: PageBodyFetcher,
        locales: Optional[Iterable[str]] = None,
        exclude_types: Optional[Iterable[str]] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.enumerator = enumerator
        self.fetcher = fetcher
        self.locales = list(locales or settings.locales)
        self.exclude_types = list(
            settings.exclude_types if exclude_types is None else exclude_types
        )
        self.extension = settings.default_document_extension
        self.index_document = settings.index_document

    async def build(
        self, output_dir: Union[str, Path], continue_on_error: bool = False
    ) -> StaticSiteReport:
        """
        Write every enumerated URL of every locale below `output_dir`.

        A URL enumerated for more than one locale is written once. By default
        the first failing URL aborts the build; with `continue_on_error` the
        failure is logged, recorded in the report and the build goes on.

        Raises:
            ConfigurationError: If the fetcher has no base URL.
        """
        base_url = self.fetcher.base_url
        if not base_url:
            raise ConfigurationError(
                "The base URL must be set for static site builds",
                config_key="base_url",
            )

        root = Path(output_dir)
        root.mkdir(parents=True, exist_ok=True)
        report = StaticSiteReport(output_dir=root)
        seen = set()

        for locale in self.locales:
            context = RequestContext(locale=locale, static=True)
            records = await self.enumerator.get_all(
                context, exclude_types=self.exclude_types
            )
            logger.info(f"Building {len(records)} URL(s) for locale {locale}")

            for record in records:
                if record.url in seen:
                    report.skipped.append(record.url)
                    continue
                seen.add(record.url)
                try:
                    target = await self._write_page(root, base_url, record.url)
                except Exception as e:
                    if not continue_on_error:
                        raise
                    error = wrap_exception(
                        e,
                        error_code="PAGE_FAILED",
                        message=f"Could not build {record.url}: {e}",
                        context={"url": record.url, "locale": locale},
                    )
                    logger.error(f"Skipping {record.url}: {error}")
                    report.failures.append(error.to_dict())
                else:
                    report.written.append(target)

        logger.info(
            f"Static site written to {root}: {len(report.written)} page(s), "
            f"{len(report.failures)} failure(s)"
        )
        return report

    async def _write_page(self, root: Path, base_url: str, url: str) -> Path:
        relative = derive_output_path(
            url, base_url, extension=self.extension, index_document=self.index_document
        )
        target = root / relative.lstrip(PATH_SEPARATOR)
        try:
            target.resolve().relative_to(root.resolve())
        except ValueError:
            raise InvalidUrlError(url, f"would be written outside {root}") from None

        body = await self.fetcher.get_body(url)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")
        logger.debug(f"Wrote {url} to {target}")
        return target
