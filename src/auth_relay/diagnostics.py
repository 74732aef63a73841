"""Support tooling for reading what a callback URL actually delivered.

Implicit-flow tokens arrive in the URL fragment while code and recovery
flows arrive in the query string, so both channels are read independently.
Nothing here takes part in redirect decisions.
"""

from typing import Literal
from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, Field

# Keys that belong to a single channel only
IMPLICIT_FLOW_PARAMS = ("access_token", "refresh_token")
QUERY_FLOW_PARAMS = ("token", "token_hash", "code", "flow")

DeliveredCredential = Literal["error", "code", "pkce_token", "implicit", "otp"]


class FragmentParams(BaseModel):
    access_token: str | None = None
    refresh_token: str | None = None
    type: str | None = None
    error: str | None = None
    error_description: str | None = None


class QueryChannelParams(BaseModel):
    token: str | None = None
    token_hash: str | None = None
    code: str | None = None
    type: str | None = None
    flow: str | None = None
    error: str | None = None
    error_description: str | None = None


class LandingDiagnostics(BaseModel):
    full_url: str
    origin: str
    pathname: str
    search: str = Field(description="Raw query string, including the leading '?'")
    fragment: str = Field(description="Raw fragment, including the leading '#'")
    hash_params: FragmentParams
    query_params: QueryChannelParams
    channel_violations: list[str] = Field(default_factory=list)

    @property
    def is_password_reset(self) -> bool:
        return (
            self.query_params.flow == "recovery"
            or self.query_params.type == "recovery"
            or self.hash_params.type == "recovery"
        )

    @property
    def delivered_credential(self) -> DeliveredCredential | None:
        """The credential the client would consume first, if any."""
        query, fragment = self.query_params, self.hash_params

        if query.error:
            return "error"

        if query.code:
            return "code"

        if query.token and query.token.startswith("pkce_"):
            return "pkce_token"

        if fragment.access_token and fragment.refresh_token:
            return "implicit"

        if query.token or query.token_hash:
            return "otp"

        return None


def _first_values(raw: str) -> dict[str, str]:
    # Mirrors URLSearchParams.get(), the first occurrence wins
    values: dict[str, str] = {}

    for key, value in parse_qsl(raw, keep_blank_values=True):
        values.setdefault(key, value)

    return values


def collect_landing_diagnostics(url: str) -> LandingDiagnostics:
    parts = urlsplit(url)

    query = _first_values(parts.query)
    fragment = _first_values(parts.fragment)

    violations = [
        f"{key} in query string" for key in IMPLICIT_FLOW_PARAMS if key in query
    ]
    violations += [
        f"{key} in fragment" for key in QUERY_FLOW_PARAMS if key in fragment
    ]

    return LandingDiagnostics(
        full_url=url,
        origin=f"{parts.scheme}://{parts.netloc}",
        pathname=parts.path or "/",
        search=f"?{parts.query}" if parts.query else "",
        fragment=f"#{parts.fragment}" if parts.fragment else "",
        hash_params=FragmentParams.model_validate(fragment),
        query_params=QueryChannelParams.model_validate(query),
        channel_violations=violations,
    )
