"""Split a request URL into the site domain and page path."""

from urllib.parse import urlsplit

from wren.errors import InvalidUrl

_DEFAULT_PORTS = {"http": 80, "https": 443}


def split_url(url: str) -> tuple[str, str]:
    """Return ``(domain, path)`` for *url*.

    The domain is the URL authority: host, plus the port when it is not
    the scheme default. The path defaults to ``"/"``; query and fragment
    are dropped.

    Raises:
        InvalidUrl: If *url* has no host or an unparsable port.
    """
    parts = urlsplit(url)
    try:
        host = parts.hostname
        port = parts.port
    except ValueError as exc:
        msg = f"Invalid URL {url!r}: {exc}"
        raise InvalidUrl(msg) from exc

    if not host:
        msg = f"URL has no host: {url!r}"
        raise InvalidUrl(msg)

    if port is None or _DEFAULT_PORTS.get(parts.scheme) == port:
        domain = host
    else:
        domain = f"{host}:{port}"
    return domain, parts.path or "/"
