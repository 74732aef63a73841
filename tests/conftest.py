from collections.abc import Callable
from typing import Any

import pytest
from cross_web import AsyncHTTPRequest, TestingRequestAdapter

from auth_relay._config import RedirectConfig
from auth_relay._redirect import RedirectEndpoint
from auth_relay._verify import VerifyEndpoint


@pytest.fixture
def config() -> RedirectConfig:
    return RedirectConfig(
        canonical_host="bwcarpe.com",
        default_path="/reset-password",
        login_path="/auth",
        callback_path="/auth/callback",
        verify_path="/auth/v1/verify",
    )


@pytest.fixture
def verify_endpoint(config: RedirectConfig) -> VerifyEndpoint:
    return VerifyEndpoint(config.verify_path)


@pytest.fixture
def redirect_endpoint() -> RedirectEndpoint:
    return RedirectEndpoint()


@pytest.fixture
def make_request() -> Callable[..., AsyncHTTPRequest]:
    def _make_request(
        query_params: dict[str, Any] | None = None,
        method: str = "GET",
        url: str = "https://api.bwcarpe.com/.netlify/functions/supabase-redirect",
    ) -> AsyncHTTPRequest:
        return AsyncHTTPRequest(
            TestingRequestAdapter(
                method=method,  # type: ignore[arg-type]
                url=url,
                query_params=query_params or {},
            )
        )

    return _make_request
