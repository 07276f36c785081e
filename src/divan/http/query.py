"""src/divan/http/query.py

View query parameter encoding.
"""

from typing import Any, Mapping

from divan.utils.coercion import to_text
from divan.utils.serialization import json_encode

__all__ = ["RESERVED_QUERY_KEYS", "encode_query_value", "encode_query"]

# Parameters whose values the server expects as JSON.
RESERVED_QUERY_KEYS = frozenset(("key", "startkey", "endkey"))


def encode_query_value(key: Any, value: Any) -> Any:
    """JSON-encode ``value`` if ``key`` is a reserved query parameter."""
    if to_text(key) in RESERVED_QUERY_KEYS:
        return json_encode(value)
    return value


def encode_query(query: Any) -> Any:
    """
    Encode the reserved values of a query.

    Args:
        query: Proplist (list or tuple of pairs) or mapping of parameters.

    Returns:
        For a proplist, a new list of pairs in reverse input order. For a
        mapping, a new dict in the same order. Keys are never rewritten and
        any other input is returned unchanged.
    """
    if isinstance(query, Mapping):
        return {key: encode_query_value(key, value) for key, value in query.items()}
    if not isinstance(query, (list, tuple)):
        return query
    encoded = []
    for key, value in query:
        encoded.insert(0, (key, encode_query_value(key, value)))
    return encoded
