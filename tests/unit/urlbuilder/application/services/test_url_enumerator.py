import pytest
from pydantic import ValidationError

from src.models import RequestContext, UrlMetadata
from src.urlbuilder.application.services.url_enumerator import UrlEnumerator


class TestUrlEnumerator:
    @pytest.mark.asyncio
    async def test_no_handlers_yields_no_urls(self):
        assert await UrlEnumerator().get_all(RequestContext()) == []

    @pytest.mark.asyncio
    async def test_sync_and_async_handlers_run_in_order(self):
        enumerator = UrlEnumerator()

        @enumerator.register
        def pages(context, results, exclude_types):
            results.append({"url": "https://example.com/", "localization_id": "home"})

        @enumerator.register
        async def pieces(context, results, exclude_types):
            results.append(
                UrlMetadata(
                    url="https://example.com/news/launch",
                    type="article",
                    id="a1:en",
                    document_id="a1",
                    localization_id="a1",
                )
            )

        records = await enumerator.get_all(RequestContext(locale="en"))

        assert [record.url for record in records] == [
            "https://example.com/",
            "https://example.com/news/launch",
        ]
        assert all(isinstance(record, UrlMetadata) for record in records)
        assert records[1].document_id == "a1"
        assert enumerator.handlers == (pages, pieces)

    @pytest.mark.asyncio
    async def test_handlers_receive_context_and_exclusions(self):
        seen = []

        def handler(context, results, exclude_types):
            seen.append((context.locale, context.static, exclude_types))

        enumerator = UrlEnumerator([handler])
        await enumerator.get_all(RequestContext(locale="fr", static=True), ["secret"])

        assert seen == [("fr", True, ("secret",))]

    @pytest.mark.asyncio
    async def test_excluded_types_are_dropped(self):
        def handler(context, results, exclude_types):
            results.append({"url": "https://example.com/a", "type": "page", "localization_id": "a"})
            results.append({"url": "https://example.com/b", "type": "secret", "localization_id": "b"})
            results.append({"url": "https://example.com/c", "localization_id": "c"})

        records = await UrlEnumerator([handler]).get_all(RequestContext(), ["secret"])

        assert [record.url for record in records] == [
            "https://example.com/a",
            "https://example.com/c",
        ]

    @pytest.mark.asyncio
    async def test_extra_fields_are_kept(self):
        def handler(context, results, exclude_types):
            results.append(
                {"url": "https://example.com/", "localization_id": "home", "priority": 0.8}
            )

        records = await UrlEnumerator([handler]).get_all(RequestContext())

        assert records[0].model_dump()["priority"] == 0.8

    @pytest.mark.asyncio
    async def test_records_without_localization_id_are_rejected(self):
        def handler(context, results, exclude_types):
            results.append({"url": "https://example.com/"})

        with pytest.raises(ValidationError):
            await UrlEnumerator([handler]).get_all(RequestContext())
