"""Unit tests for divan.http.url module."""

import pytest

from divan.exceptions import InvalidURLError
from divan.http.url import URL, parse_query_string


class TestURL:
    """Tests for URL class."""

    def test_parse_http_url(self):
        """Test parsing basic HTTP URL."""
        url = URL("http://example.com/path")
        assert url.scheme == "http"
        assert url.host == "example.com"
        assert url.port is None  # Default HTTP port not explicitly set
        assert url.path == "/path"

    def test_parse_url_with_port(self):
        """Test parsing URL with explicit port."""
        url = URL("http://127.0.0.1:5984/db")
        assert url.host == "127.0.0.1"
        assert url.port == 5984
        assert url.path == "/db"

    def test_parse_url_with_query(self):
        """Test URL parsing keeps the query string apart from the path."""
        url = URL("http://example.com/db/_all_docs?limit=10&skip=2")
        assert url.query == "limit=10&skip=2"
        assert url.path == "/db/_all_docs"

    @pytest.mark.parametrize(
        "raw",
        ["example.com/path", "/db/doc", "", "http://[::1/db", "http://host:port/db"],
    )
    def test_invalid_url_raises(self, raw):
        """Test that URLs without scheme and host, or malformed, raise."""
        with pytest.raises(InvalidURLError):
            URL(raw)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("HTTP://Example.COM/a?b=c", "http://example.com/a"),
            ("http://example.com:80/a", "http://example.com/a"),
            ("https://example.com:443", "https://example.com/"),
            ("http://example.com:5984/db#frag", "http://example.com:5984/db"),
            ("https://example.com:80/", "https://example.com:80/"),
            ("http://[::1]:5984/db", "http://[::1]:5984/db"),
        ],
    )
    def test_base(self, raw, expected):
        """Test the base URL without query, fragment or default port."""
        assert URL(raw).base == expected


class TestParseQueryString:
    """Tests for parse_query_string()."""

    def test_empty(self):
        """Test that an empty query gives no pairs."""
        assert parse_query_string("") == []

    def test_decodes_and_keeps_order(self):
        """Test decoding of escapes, both separators and blank values."""
        result = parse_query_string("a=1&b=2;c=x+y&d=%2F&e")
        assert result == [("a", "1"), ("b", "2"), ("c", "x y"), ("d", "/"), ("e", "")]

    def test_repeated_keys(self):
        """Test that repeated keys are all kept."""
        assert parse_query_string("k=1&k=2") == [("k", "1"), ("k", "2")]
