import pytest

from src.settings import Settings
from src.urlbuilder.application.services.page_body_fetcher import PageBodyFetcher
from src.urlbuilder.domain.exceptions import (
    ConfigurationError,
    InvalidStatusError,
    InvalidUrlError,
)

BASE_URL = "https://example.com"


class TestRelativePath:
    @pytest.fixture
    def fetcher(self, site_app, settings):
        return PageBodyFetcher(site_app, settings=settings)

    @pytest.mark.parametrize(
        "url, expected",
        [
            (BASE_URL, "/"),
            (f"{BASE_URL}/", "/"),
            (f"{BASE_URL}/about", "/about"),
            (f"{BASE_URL}/blog/", "/blog/"),
        ],
    )
    def test_path_relative_to_base(self, fetcher, url, expected):
        assert fetcher.relative_path(url) == expected

    def test_url_outside_base(self, fetcher):
        with pytest.raises(InvalidUrlError):
            fetcher.relative_path("https://other.com/about")

    def test_host_that_merely_starts_with_base(self, fetcher):
        with pytest.raises(InvalidUrlError):
            fetcher.relative_path("https://example.com.evil.net/about")

    def test_query_string_is_rejected(self, fetcher):
        with pytest.raises(InvalidUrlError) as exc_info:
            fetcher.relative_path(f"{BASE_URL}/about?page=2")
        assert "contains ?" in str(exc_info.value)

    def test_base_url_is_required(self, site_app):
        fetcher = PageBodyFetcher(site_app, settings=Settings(base_url=None))
        with pytest.raises(ConfigurationError):
            fetcher.relative_path(f"{BASE_URL}/about")

    def test_explicit_base_url_overrides_settings(self, site_app):
        fetcher = PageBodyFetcher(
            site_app, base_url="https://site.test/", settings=Settings(base_url=BASE_URL)
        )
        assert fetcher.base_url == "https://site.test"
        assert fetcher.relative_path("https://site.test/about") == "/about"


class TestGetBody:
    @pytest.mark.asyncio
    async def test_returns_rendered_body(self, site_app, settings):
        fetcher = PageBodyFetcher(site_app, settings=settings)
        assert await fetcher.get_body(f"{BASE_URL}/about") == "<h1>About</h1>"

    @pytest.mark.asyncio
    async def test_root(self, site_app, settings):
        fetcher = PageBodyFetcher(site_app, settings=settings)
        assert await fetcher.get_body(BASE_URL) == "<h1>Home</h1>"

    @pytest.mark.asyncio
    async def test_json_body(self, site_app, settings):
        fetcher = PageBodyFetcher(site_app, settings=settings)
        assert await fetcher.get_body(f"{BASE_URL}/data") == '{"ok":true}'

    @pytest.mark.asyncio
    async def test_base_url_with_path_prefix(self, site_app):
        fetcher = PageBodyFetcher(site_app, base_url=f"{BASE_URL}/site")
        assert await fetcher.get_body(f"{BASE_URL}/site/about") == "<h1>About</h1>"

    @pytest.mark.asyncio
    async def test_not_found_is_an_invalid_status(self, site_app, settings):
        fetcher = PageBodyFetcher(site_app, settings=settings)
        with pytest.raises(InvalidStatusError) as exc_info:
            await fetcher.get_body(f"{BASE_URL}/missing")
        assert exc_info.value.context["status_code"] == 404

    @pytest.mark.asyncio
    async def test_redirects_are_not_followed(self, site_app, settings):
        fetcher = PageBodyFetcher(site_app, settings=settings)
        with pytest.raises(InvalidStatusError) as exc_info:
            await fetcher.get_body(f"{BASE_URL}/moved")
        assert exc_info.value.context["status_code"] == 307

    @pytest.mark.asyncio
    async def test_missing_base_url(self, site_app):
        fetcher = PageBodyFetcher(site_app, settings=Settings(base_url=None))
        with pytest.raises(ConfigurationError):
            await fetcher.get_body(f"{BASE_URL}/about")

    @pytest.mark.asyncio
    async def test_base_url_from_environment(self, site_app, monkeypatch):
        from src.settings import reload_settings

        monkeypatch.setenv("BASE_URL", f"{BASE_URL}/")
        reload_settings()
        fetcher = PageBodyFetcher(site_app)
        assert fetcher.base_url == BASE_URL
        assert await fetcher.get_body(f"{BASE_URL}/about") == "<h1>About</h1>"
