from collections.abc import Iterable, Mapping
from dataclasses import replace

from .models.redirect_target import RedirectTarget

# Only these keys are ever copied from the provider's request to the client
FORWARDED_PARAMS = (
    "token",
    "type",
    "token_hash",
    "code",
    "error",
    "error_description",
)


def extract_forwarded_params(
    query_params: Mapping[str, str | None],
) -> dict[str, str]:
    params: dict[str, str] = {}

    for key in FORWARDED_PARAMS:
        value = query_params.get(key)

        if value:
            params[key] = value

    return params


def merge(
    target: RedirectTarget,
    recovered: Mapping[str, str],
    *,
    extra_keys: Iterable[str] = (),
) -> RedirectTarget:
    """
    Fold recovered identity parameters into a redirect target.

    Allow-listed keys in ``recovered`` overwrite the same keys already on the
    target, every other key of the target is left alone. Keys outside the
    allow-list are dropped.

    Args:
        target: The resolved target, possibly carrying the hint's own params
        recovered: Parameters recovered from the inbound request
        extra_keys: Keys allowed for this call only (e.g. ``flow``)

    Returns:
        A new target, the original is not modified
    """
    allowed = set(FORWARDED_PARAMS).union(extra_keys)

    params = dict(target.params)

    for key, value in recovered.items():
        if key in allowed:
            params[key] = value

    return replace(target, params=params)
