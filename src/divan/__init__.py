"""src/divan/__init__.py

Divan - utility layer of a CouchDB HTTP client.

Divan gathers the small, stateless transforms a database HTTP client needs
before a request goes on the wire. It has no dependencies beyond Python's
standard library and keeps no state between calls.

Key Features:
    - JSON encoding and decoding with an explicit object wrapper
    - Document id encoding that keeps the ``_design/`` prefix readable
    - JSON encoding of ``key``, ``startkey`` and ``endkey`` query values
    - OAuth 1.0a request signing and ``Authorization`` header construction
    - Proplist helpers: option normalization, lookup and merge
    - Coercions between text, bytes, symbols and integers

Example:
    Building a view request::

        from divan import Symbol, encode_docid, encode_query, parse_options

        path = "/db/" + encode_docid("_design/blog posts") + "/_view/by_date"
        options = parse_options([Symbol("descending"), ("startkey", [2024, 1])])
        query = encode_query(options)

    Signing a request::

        from divan import oauth_header

        name, value = oauth_header(
            "http://127.0.0.1:5984/db/doc?rev=1-abc",
            "get",
            {"consumer_key": "ck", "consumer_secret": "cs"},
        )
"""

import logging

from divan.auth.oauth import OAuthCredentials, oauth_header
from divan.auth.signing import SignatureMethod, Signer
from divan.exceptions import (
    CoercionError,
    DivanError,
    InvalidJSONError,
    JSONEncodeError,
    OAuthError,
)
from divan.http.docid import encode_docid
from divan.http.query import encode_query, encode_query_value
from divan.utils.coercion import Symbol, to_bytes, to_integer, to_symbol, to_text
from divan.utils.proplist import get_value, merge, merge1, parse_options
from divan.utils.serialization import JsonObject, json_decode, json_encode
from divan.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Symbol",
    "to_text",
    "to_bytes",
    "to_integer",
    "to_symbol",
    "get_value",
    "parse_options",
    "merge",
    "merge1",
    "JsonObject",
    "json_encode",
    "json_decode",
    "encode_docid",
    "encode_query",
    "encode_query_value",
    "OAuthCredentials",
    "SignatureMethod",
    "Signer",
    "oauth_header",
    "DivanError",
    "CoercionError",
    "InvalidJSONError",
    "JSONEncodeError",
    "OAuthError",
]
