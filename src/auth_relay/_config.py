from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CANONICAL_SCHEME = "https"


class RedirectConfig(BaseSettings):
    """Process-wide redirect settings.

    Loaded once at startup, env vars use the ``AUTH_RELAY_`` prefix:
        AUTH_RELAY_CANONICAL_HOST=example.com
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_RELAY_",
        frozen=True,
        extra="ignore",
    )

    canonical_host: str = Field(
        "bwcarpe.com", description="Host every redirect is pinned to"
    )
    default_path: str = Field(
        "/reset-password", description="Destination when no usable hint is given"
    )
    login_path: str = Field("/auth", description="Login page of the application")
    callback_path: str = Field(
        "/auth/callback", description="Page that consumes identity parameters"
    )
    verify_path: str = Field(
        "/auth/v1/verify", description="Where the provider sends recovery links"
    )

    invalid_link_message: str = "Invalid reset link"
    verify_failure_message: str = "Failed to verify reset token"

    @field_validator("canonical_host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        host = value.strip().lower()

        if not host or any(c in host for c in "/@?#\\") or any(
            c.isspace() for c in host
        ):
            raise ValueError("canonical_host must be a bare host, e.g. example.com")

        name, sep, port = host.partition(":")

        if not name:
            raise ValueError("canonical_host must be a bare host, e.g. example.com")

        if sep and not (port.isdigit() and 0 < int(port) <= 65535):
            raise ValueError("canonical_host port must be a number from 1 to 65535")

        return host

    @field_validator("default_path", "login_path", "callback_path", "verify_path")
    @classmethod
    def _validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("paths must start with '/'")

        return value

    @property
    def canonical_origin(self) -> str:
        return f"{CANONICAL_SCHEME}://{self.canonical_host}"

    @property
    def login_paths(self) -> frozenset[str]:
        # Both spellings of the login page get rewritten to the callback page
        base = self.login_path.rstrip("/") or "/"

        return frozenset({base, base + "/"})
