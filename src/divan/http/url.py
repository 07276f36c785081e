"""src/divan/http/url.py

URL parser for Divan.
"""

import urllib.parse
from typing import List, Tuple

from divan.exceptions import InvalidURLError

__all__ = ["URL", "parse_query_string"]

DEFAULT_PORTS = {"http": 80, "https": 443}


class URL:
    """Utility class for URL parsing and information."""

    __slots__ = ("raw", "parsed", "scheme", "host", "port", "path", "query")

    def __init__(self, url: str):
        try:
            self.parsed = urllib.parse.urlsplit(url)
            self.port = self.parsed.port
        except ValueError as exc:
            raise InvalidURLError(f"Invalid URL {url!r}: {exc}") from exc
        if not self.parsed.scheme or not self.parsed.hostname:
            raise InvalidURLError(f"URL {url!r} has no scheme or host")
        self.raw = url
        self.scheme = self.parsed.scheme.lower()
        self.host = self.parsed.hostname
        self.path = self.parsed.path
        self.query = self.parsed.query

    @property
    def base(self) -> str:
        """
        Scheme, host, non-default port and path, without query or fragment.
        """
        authority = self.host
        if ":" in authority:
            authority = f"[{authority}]"
        if self.port is not None and self.port != DEFAULT_PORTS.get(self.scheme):
            authority = f"{authority}:{self.port}"
        return f"{self.scheme}://{authority}{self.path or '/'}"


def parse_query_string(query: str) -> List[Tuple[str, str]]:
    """
    Parse an ``application/x-www-form-urlencoded`` query string.

    Pairs may be separated by ``&`` or ``;``. ``+`` and ``%XX`` escapes are
    decoded and blank values are kept.

    Returns:
        Pairs in the order they appear.
    """
    if not query:
        return []
    return urllib.parse.parse_qsl(query.replace(";", "&"), keep_blank_values=True)
