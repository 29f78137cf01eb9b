"""
This module contains the UrlEnumerator, which collects every URL reachable
for a given request context from the handlers registered with it.
"""

import inspect
from typing import Any, Awaitable, Callable, Iterable, List, Optional, Tuple, Union

from src.logger import Logger
from src.models import RequestContext, UrlMetadata

logger = Logger(__name__)

UrlHandler = Callable[
    [RequestContext, List[Any], Tuple[str, ...]], Union[None, Awaitable[None]]
]


class UrlEnumerator:
    """
    Lists all URLs reachable with a request context. Used to build static
    sites and sitemaps, usually once per locale.

    Handlers receive the context, the shared results list and the content
    types to leave out, and append `UrlMetadata` records (or dicts with the
    same fields) to the list. They may be plain functions or coroutines and
    run one after another in registration order.
    """

    def __init__(self, handlers: Optional[Iterable[UrlHandler]] = None):
        self._handlers: List[UrlHandler] = list(handlers or [])

    def register(self, handler: UrlHandler) -> UrlHandler:
        """Add a handler. Returns it unchanged so it can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    @property
    def handlers(self) -> Tuple[UrlHandler, ...]:
        return tuple(self._handlers)

    async def get_all(
        self, context: RequestContext, exclude_types: Iterable[str] = ()
    ) -> List[UrlMetadata]:
        """
        Run every handler and return the records they produced.

        Args:
            context: The request the URLs are enumerated for.
            exclude_types: Content type names to leave out. Handlers should
                honor it; records that slip through are dropped here.

        Returns:
            The URL records in the order the handlers produced them.
        """
        excluded = tuple(exclude_types)
        results: List[Any] = []
        for handler in self._handlers:
            outcome = handler(context, results, excluded)
            if inspect.isawaitable(outcome):
                await outcome

        records = [
            record if isinstance(record, UrlMetadata) else UrlMetadata.model_validate(record)
            for record in results
        ]
        kept = [record for record in records if record.type not in excluded]
        if len(kept) != len(records):
            logger.debug(
                f"Dropped {len(records) - len(kept)} URL(s) of excluded types {excluded}"
            )
        logger.debug(f"Enumerated {len(kept)} URL(s) for locale {context.locale}")
        return kept
