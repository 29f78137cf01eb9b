"""
SplitUrl - a URL taken apart into base, raw query string and fragment.

Only the separators are interpreted; scheme and host stay part of the opaque
base.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.constants import FRAGMENT_SEPARATOR, QUERY_SEPARATOR


@dataclass(frozen=True)
class SplitUrl:
    base: str
    query: Optional[str] = None
    fragment: Optional[str] = None

    @classmethod
    def parse(cls, url: str) -> "SplitUrl":
        """
        The fragment starts after the last `#`; the query string after the
        first `?` of what precedes it. `query` is None when there is no `?`
        at all, and "" when the `?` is followed by nothing.
        """
        fragment = None
        if FRAGMENT_SEPARATOR in url:
            url, _, fragment = url.rpartition(FRAGMENT_SEPARATOR)
        base, separator, query = url.partition(QUERY_SEPARATOR)
        return cls(base=base, query=query if separator else None, fragment=fragment)

    def with_fragment(self, url: str) -> str:
        """Re-attach the captured fragment to `url`."""
        if self.fragment is None:
            return url
        return f"{url}{FRAGMENT_SEPARATOR}{self.fragment}"

    def __str__(self) -> str:
        url = self.base
        if self.query is not None:
            url += f"{QUERY_SEPARATOR}{self.query}"
        return self.with_fragment(url)
