"""Gravatar URL builder."""
import hashlib
from urllib.parse import urlencode


GRAVATAR_BASE_URL = "//www.gravatar.com/avatar/"


def gravatar_url(email: str, size: str = "200", rating: str = "pg", default: str = "mm") -> str:
    """
    Build a protocol-relative Gravatar URL for an email address.

    The hash is the md5 of the trimmed, lowercased email.
    """
    digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"
