"""
URL helpers
-----------

Role:
- Canonicalise user-entered URLs (website, social links, avatars) so that
  whatever a user types ends up stored as a consistent https URL.

Functions:
- normalize_url(url, force_https=True)
"""
import re
from urllib.parse import unquote_plus, urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_TRACKING_PARAM_RE = re.compile(r"^utm_\w+", re.IGNORECASE)


def normalize_url(url: str, force_https: bool = True) -> str:
    """
    Normalize a URL.

    - Adds a scheme when missing ("//host" and bare "host" forms)
    - Upgrades http to https when force_https is set
    - Lowercases the host and strips a leading "www."
    - Drops the default port, duplicate slashes and the trailing slash
    - Sorts query parameters and removes utm_* tracking parameters

    Args:
        url: URL as entered by the user

    Returns:
        Normalized URL string

    Raises:
        ValueError: If the URL is empty or has no host
    """
    if url is None or not url.strip():
        raise ValueError("URL cannot be empty")

    url = url.strip()
    if url.startswith("//"):
        url = ("https:" if force_https else "http:") + url
    elif not _SCHEME_RE.match(url):
        url = "http://" + url

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if force_https and scheme == "http":
        scheme = "https"

    host = (parts.hostname or "").rstrip(".")
    if not host:
        raise ValueError(f"Invalid URL: {url}")
    if host.startswith("www.") and host.count(".") >= 2:
        host = host[len("www."):]

    # IPv6 literals lose their brackets in SplitResult.hostname
    netloc = f"[{host}]" if ":" in host else host
    if parts.username:
        credentials = parts.username
        if parts.password:
            credentials += ":" + parts.password
        netloc = f"{credentials}@{netloc}"
    port = parts.port
    if port and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"

    path = re.sub(r"/{2,}", "/", parts.path)
    path = path.rstrip("/")

    return urlunsplit((scheme, netloc, path, _normalize_query(parts.query), parts.fragment))


def _normalize_query(query: str) -> str:
    """Sort query parameters and drop tracking ones, keeping each pair as written."""
    pairs = [pair for pair in query.split("&") if pair]
    kept = [
        pair for pair in pairs
        if not _TRACKING_PARAM_RE.match(unquote_plus(pair.split("=", 1)[0]))
    ]
    return "&".join(sorted(kept, key=lambda pair: pair.split("=", 1)))

