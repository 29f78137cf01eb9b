"""
This module contains `compose`, which builds filter URLs from a base URL and
layered override objects.

Override objects are mappings whose entries become query parameters,
replacing any existing parameter of the same name. A value of None, '' or
REMOVE deletes the parameter (the number 0 does not). When several objects
are passed the last one wins, so existing parameters can go first and the
ones being changed last. Parameters already in the URL's query string have
the lowest precedence of all.

Pretty URLs: names listed in `path_keys` are appended to the path, in that
order, when their value is slug-safe. The first missing, empty or
non-slug-safe value ends path processing so the URL is never ambiguous.
Existing path segments are never detected or overridden.

Arrays: AddToSet and Pull add a value to or remove a value from a
parameter's list of values instead of replacing it. Both fold over the
existing query string first and then over each override in turn.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Set, Tuple

from src.core.constants import PATH_SEPARATOR, QUERY_SEPARATOR
from src.logger import Logger
from src.urlbuilder.domain.value_objects import (
    AddToSet,
    Pull,
    SplitUrl,
    coerce_overrides,
    is_empty,
)
from src.urlbuilder.infrastructure.external import (
    is_slug_safe,
    ordered,
    parse_query,
    stringify_query,
    stringify_value,
)

logger = Logger(__name__)

_NON_SCALAR = (Mapping, list, tuple, set, frozenset, AddToSet, Pull)


def compose(url: Any, path_keys: Any = None, *overrides: Any) -> str:
    """
    Build a URL from `url` with `overrides` applied.

    Args:
        url: The starting URL, possibly with a query string and fragment.
        path_keys: Parameter names to place in the path, in order. May be
            omitted (None); a mapping here is taken as the first override.
        *overrides: Override mappings, or sequences of them, lowest
            precedence first.

    Returns:
        The composed URL, `base[?query][#fragment]`.
    """
    url = str(url)
    if isinstance(path_keys, Mapping):
        overrides = (path_keys,) + overrides
        path_keys = None

    objects = _flatten(overrides)
    if isinstance(path_keys, str):
        path_keys = [path_keys]
    path_keys = list(path_keys or ())
    if not path_keys and not objects:
        return url

    parts = SplitUrl.parse(url)

    # Highest precedence first
    chain = [coerce_overrides(data) for data in reversed(objects)]
    if parts.query is not None:
        chain.append(parse_query(parts.query))

    base, consumed = _resolve_path(parts.base, path_keys, chain)
    query = _resolve_query(chain, consumed)

    if query:
        base = f"{base}{QUERY_SEPARATOR}{stringify_query(query)}"
    return parts.with_fragment(base)


def _flatten(overrides: Tuple[Any, ...]) -> List[Mapping]:
    objects: List[Mapping] = []
    for item in overrides:
        if item is None:
            continue
        if isinstance(item, Mapping):
            objects.append(item)
        elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            objects.extend(data for data in item if isinstance(data, Mapping))
        else:
            logger.warning(f"Ignoring override of type {type(item).__name__}")
    return objects


def _lookup(chain: List[Mapping], key: str) -> Tuple[bool, Any]:
    for data in chain:
        if key in data:
            return True, data[key]
    return False, None


def _resolve_path(
    base: str, path_keys: List[str], chain: List[Mapping]
) -> Tuple[str, Set[str]]:
    consumed: Set[str] = set()
    for key in path_keys:
        found, value = _lookup(chain, key)
        if not found:
            logger.debug(f"Path key '{key}' has no value, ending path at {base!r}")
            break
        if is_empty(value):
            consumed.add(key)
            break
        # Still usable as a query parameter, so not consumed
        if isinstance(value, _NON_SCALAR):
            break
        segment = stringify_value(value)
        if not is_slug_safe(segment):
            logger.debug(f"Path key '{key}' value {segment!r} is not slug-safe")
            break
        if base == PATH_SEPARATOR:
            base += segment
        else:
            base += PATH_SEPARATOR + segment
        consumed.add(key)
    return base, consumed


def _resolve_query(chain: List[Mapping], consumed: Set[str]) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    for data in reversed(chain):
        for key, value in data.items():
            if key in consumed:
                continue
            if isinstance(value, Pull):
                removed = stringify_value(value.value)
                remaining = [item for item in _as_list(query.get(key)) if item != removed]
                if remaining:
                    query[key] = remaining
                else:
                    query.pop(key, None)
            elif isinstance(value, AddToSet):
                query[key] = _union(_as_list(query.get(key)), stringify_value(value.value))
            elif is_empty(value):
                query.pop(key, None)
            else:
                query[key] = value
    return query


def _as_list(value: Any) -> List[str]:
    if value is None or isinstance(value, Mapping):
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [
            stringify_value(item)
            for item in ordered(value)
            if not isinstance(item, _NON_SCALAR) and not is_empty(item)
        ]
    return [stringify_value(value)]


def _union(values: List[str], element: str) -> List[str]:
    merged: List[str] = []
    for item in values + [element]:
        if item not in merged:
            merged.append(item)
    return merged
