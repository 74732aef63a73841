from fastapi import FastAPI

from ._config import RedirectConfig
from .router import AuthRelayRouter


def create_app(config: RedirectConfig | None = None) -> FastAPI:
    """Build the redirect service.

    Example:
        uvicorn --factory auth_relay.app:create_app
    """
    app = FastAPI(title="Auth Relay", docs_url=None, redoc_url=None)

    app.include_router(AuthRelayRouter(config=config))

    return app
