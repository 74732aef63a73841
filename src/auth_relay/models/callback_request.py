from collections.abc import Mapping
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class LinkType(str, Enum):
    RECOVERY = "recovery"
    # signup, invite and magiclink links are not told apart yet
    OTHER = "other"


class IncomingCallbackRequest(BaseModel):
    """Identity-provider callback parameters, parsed once per request."""

    model_config = ConfigDict(frozen=True)

    token: str | None = Field(None, description="Opaque recovery/OTP token")
    token_hash: str | None = Field(None, description="Hashed OTP token")
    code: str | None = Field(None, description="PKCE authorization code")
    type: str | None = Field(
        None, description="Link type, e.g. recovery, signup, invite, magiclink"
    )
    redirect_to: str | None = Field(
        None, description="Untrusted destination hint supplied by the caller"
    )
    error: str | None = None
    error_description: str | None = None

    @classmethod
    def from_query_params(cls, query_params: Mapping[str, str | None]) -> Self:
        # Empty values are treated the same as missing ones
        values = {
            name: query_params.get(name) or None for name in cls.model_fields
        }

        return cls(**values)
