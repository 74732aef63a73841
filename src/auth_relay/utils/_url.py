from collections.abc import Mapping
from urllib.parse import quote, urlencode, urlunsplit


def encode_query(params: Mapping[str, str]) -> str:
    """
    Percent-encode query parameters.

    Spaces become ``%20`` rather than ``+`` so the result reads the same in
    browsers and in the JavaScript client that consumes it.
    """
    return urlencode(params, quote_via=quote)


def build_url(
    scheme: str, host: str, path: str, params: Mapping[str, str] | None = None
) -> str:
    """
    Assemble an absolute URL. No fragment is ever produced, identity
    parameters only travel in the query string.

    Args:
        scheme: URL scheme, e.g. ``https``
        host: Host (optionally with port)
        path: Absolute path, ``/`` is used when empty
        params: Query parameters, omitted entirely when empty

    Returns:
        The absolute URL
    """
    return urlunsplit((scheme, host, path or "/", encode_query(params or {}), ""))


def append_query(url: str, params: Mapping[str, str]) -> str:
    if not params:
        return url

    separator = "&" if "?" in url else "?"

    return f"{url}{separator}{encode_query(params)}"
