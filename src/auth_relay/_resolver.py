import logging
from urllib.parse import parse_qsl, quote, urljoin, urlsplit

from ._config import RedirectConfig
from .diagnostics import IMPLICIT_FLOW_PARAMS
from .exceptions import MalformedHintError
from .models.redirect_target import RedirectTarget

logger = logging.getLogger(__name__)

ALLOWED_HINT_SCHEMES = ("http", "https")

# Characters left as-is in a path, everything else is percent-encoded
PATH_SAFE_CHARS = "/%:@!$&'()*+,;=-._~"


def default_target(config: RedirectConfig) -> RedirectTarget:
    return RedirectTarget(host=config.canonical_host, path=config.default_path)


def _parse_hint(hint: str, config: RedirectConfig) -> tuple[str, str, dict[str, str]]:
    """Split a hint into (host, path, params), relative to the canonical origin."""
    hint = hint.strip()

    if any(c.isspace() or not c.isprintable() for c in hint):
        raise MalformedHintError("Hint contains whitespace or control characters")

    if "\\" in hint:
        raise MalformedHintError("Hint contains a backslash")

    try:
        parts = urlsplit(urljoin(f"{config.canonical_origin}/", hint))
        # Out of range or non numeric ports only fail on access
        parts.port
    except ValueError as e:
        raise MalformedHintError(str(e)) from e

    if parts.scheme not in ALLOWED_HINT_SCHEMES:
        raise MalformedHintError(f"Unsupported scheme '{parts.scheme}'")

    # Implicit-flow tokens only ever travel in the fragment
    params = {
        key: value
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in IMPLICIT_FLOW_PARAMS
    }

    return parts.hostname or "", quote(parts.path, safe=PATH_SAFE_CHARS), params


def resolve(hint: str | None, config: RedirectConfig) -> RedirectTarget:
    """
    Compute where a callback should land, from an untrusted ``redirect_to`` hint.

    The hint can only steer the path and query parameters: host and scheme
    are always replaced with the canonical ones, so a hint pointing at
    another site still lands on the application. Hints pointing at the login
    page are sent to the callback page instead, since only the callback page
    consumes identity parameters.

    A missing or malformed hint yields the default target.
    """
    if not hint:
        return default_target(config)

    try:
        hint_host, path, params = _parse_hint(hint, config)
    except MalformedHintError as e:
        logger.warning("Failed to parse redirect_to, using default: %s", e)

        return default_target(config)

    if hint_host and hint_host != config.canonical_host.split(":")[0]:
        logger.warning(
            "Pinning redirect_to host %s to %s", hint_host, config.canonical_host
        )

    # Collapse leading slashes so the path can't read as a protocol-relative URL
    path = "/" + path.lstrip("/")

    if path in config.login_paths:
        logger.info("Redirecting to %s instead of %s", config.callback_path, path)
        path = config.callback_path

    return RedirectTarget(host=config.canonical_host, path=path, params=params)
