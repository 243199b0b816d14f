"""
Tests for the Gravatar URL builder.
"""
import hashlib

from devconnect.utils.gravatar import gravatar_url
from devconnect.utils.url_utils import normalize_url


def test_hashes_trimmed_lowercased_email():
    digest = hashlib.md5(b"ada@example.com").hexdigest()

    url = gravatar_url("  Ada@Example.com ")

    assert url == f"//www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def test_custom_parameters():
    url = gravatar_url("ada@example.com", size="80", rating="g", default="identicon")

    assert url.endswith("?s=80&r=g&d=identicon")


def test_normalized_gravatar_is_https():
    digest = hashlib.md5(b"ada@example.com").hexdigest()

    url = normalize_url(gravatar_url("ada@example.com"))

    assert url == f"https://gravatar.com/avatar/{digest}?d=mm&r=pg&s=200"
