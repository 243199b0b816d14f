"""
Tests for URL normalization.
"""
import pytest

from devconnect.utils.url_utils import normalize_url


class TestNormalizeUrl:
    """Tests for normalize_url."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("example.com", "https://example.com"),
            ("http://example.com/", "https://example.com"),
            ("  https://example.com/about  ", "https://example.com/about"),
            ("//cdn.example.com/a.png", "https://cdn.example.com/a.png"),
            ("www.twitter.com/ada", "https://twitter.com/ada"),
            ("http://localhost:8080/x", "https://localhost:8080/x"),
            ("ftp://files.example.com/pub/", "ftp://files.example.com/pub"),
        ],
    )
    def test_normalizes_common_inputs(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_canonicalizes_host_port_path_and_query(self):
        url = "HTTPS://WWW.Example.COM:443/Path//to/?b=2&a=1&utm_source=news#frag"

        assert normalize_url(url) == "https://example.com/Path/to?a=1&b=2#frag"

    def test_keeps_http_without_force_https(self):
        assert normalize_url("http://example.com", force_https=False) == "http://example.com"

    def test_protocol_relative_without_force_https_uses_http(self):
        assert normalize_url("//example.com", force_https=False) == "http://example.com"

    def test_keeps_www_when_it_is_the_domain(self):
        assert normalize_url("www.com") == "https://www.com"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_rejects_empty_urls(self, raw):
        with pytest.raises(ValueError):
            normalize_url(raw)

    def test_keeps_ipv6_brackets(self):
        assert normalize_url("http://[::1]:8080/x") == "https://[::1]:8080/x"

    def test_keeps_query_keys_without_values(self):
        assert normalize_url("example.com/?ref&a=1") == "https://example.com?a=1&ref"
