"""
Query string encoding and decoding.

Decoding understands bracketed keys (`colors[0]=blue`, `colors[]=blue`,
`filter[type]=event`) and folds repeated keys into lists. Encoding writes
lists as repeated keys and mappings in bracket notation, percent-encoding
everything outside the RFC 3986 unreserved set (so a space becomes `%20`).
Bytes that are not valid UTF-8 survive a decode and re-encode unchanged.
"""

import re
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, quote

from src.core.constants import MAX_QUERY_KEY_DEPTH

_KEY_PATTERN = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_PATTERN = re.compile(r"\[([^\[\]]*)\]")
_INDEX_PATTERN = re.compile(r"[0-9]+")

# Round-trips undecodable bytes through lone surrogates
_DECODE_ERRORS = "surrogateescape"


def stringify_value(value: Any) -> str:
    """String form of a scalar as it appears in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def ordered(values: Iterable[Any]) -> List[Any]:
    """Items of a list or tuple as given; members of a set sorted by their URL form."""
    if isinstance(values, (set, frozenset)):
        return sorted(values, key=stringify_value)
    return list(values)


def parse_query(query: Optional[str]) -> Dict[str, Any]:
    """
    Parse a raw query string (without the leading `?`) into an ordered dict.

    Malformed pairs degrade to literal keys; an empty or missing query string
    yields an empty dict. Keys nest at most MAX_QUERY_KEY_DEPTH levels deep,
    any further brackets are kept as one literal key.
    """
    result: Dict[str, Any] = {}
    if not query:
        return result
    for raw_key, value in parse_qsl(query, keep_blank_values=True, errors=_DECODE_ERRORS):
        name, segments = _split_key(raw_key)
        _assign(result, name, segments, value)
    return _compact(result)


def stringify_query(query: Mapping[str, Any]) -> str:
    """Encode a mapping produced by the composer (or `parse_query`)."""
    return "&".join(
        f"{_encode(key)}={_encode(value)}"
        for name, value in query.items()
        for key, value in _pairs(str(name), value)
    )


def _encode(text: str) -> str:
    return quote(text, safe="", errors=_DECODE_ERRORS)


def _split_key(raw_key: str) -> Tuple[str, List[str]]:
    match = _KEY_PATTERN.match(raw_key)
    if not match or not match.group(2):
        return raw_key, []
    segments = _SEGMENT_PATTERN.findall(match.group(2))
    if len(segments) > MAX_QUERY_KEY_DEPTH:
        rest = "".join(f"[{segment}]" for segment in segments[MAX_QUERY_KEY_DEPTH:])
        segments = segments[:MAX_QUERY_KEY_DEPTH] + [rest]
    return match.group(1), segments


def _assign(container: Dict[str, Any], key: str, segments: List[str], value: str):
    if not segments:
        if key not in container:
            container[key] = value
            return
        existing = container[key]
        if isinstance(existing, list):
            existing.append(value)
        elif isinstance(existing, dict):
            existing[str(_next_index(existing))] = value
        else:
            container[key] = [existing, value]
        return

    child = container.get(key)
    if not isinstance(child, dict):
        child = _as_indexed(child)
        container[key] = child
    head, rest = segments[0], segments[1:]
    if head == "":
        head = str(_next_index(child))
    _assign(child, head, rest, value)


def _as_indexed(value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, list):
        return {str(index): item for index, item in enumerate(value)}
    return {"0": value}


def _is_index(key: str) -> bool:
    # str.isdigit() also accepts characters such as '²' that int() rejects
    return _INDEX_PATTERN.fullmatch(key) is not None


def _next_index(container: Dict[str, Any]) -> int:
    indices = [int(key) for key in container if _is_index(key)]
    return max(indices) + 1 if indices else 0


def _compact(value: Any) -> Any:
    """Turn dicts keyed only by array indices into lists, recursively."""
    if isinstance(value, list):
        return [_compact(item) for item in value]
    if not isinstance(value, dict):
        return value
    compacted = {key: _compact(item) for key, item in value.items()}
    if compacted and all(_is_index(key) for key in compacted):
        return [compacted[key] for key in sorted(compacted, key=int)]
    return compacted


def _pairs(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _pairs(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for index, item in enumerate(ordered(value)):
            if isinstance(item, (Mapping, list, tuple, set, frozenset)):
                yield from _pairs(f"{prefix}[{index}]", item)
            elif item is not None:
                yield prefix, stringify_value(item)
    else:
        yield prefix, stringify_value(value)
