from .query_string import ordered, parse_query, stringify_query, stringify_value
from .slug import is_slug_safe

__all__ = ["ordered", "parse_query", "stringify_query", "stringify_value", "is_slug_safe"]
