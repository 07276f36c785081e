"""src/divan/http/__init__.py

URL, query and document id encoding for Divan.
"""

from .docid import encode_docid
from .query import encode_query, encode_query_value
from .url import URL, parse_query_string

__all__ = [
    "URL",
    "parse_query_string",
    "encode_docid",
    "encode_query",
    "encode_query_value",
]
