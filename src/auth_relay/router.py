import logging

from fastapi import APIRouter

from ._config import RedirectConfig
from ._redirect import RedirectEndpoint
from ._verify import VerifyEndpoint

logger = logging.getLogger(__name__)


class AuthRelayRouter(APIRouter):
    _config: RedirectConfig

    def __init__(
        self,
        config: RedirectConfig | None = None,
        # Catch-all by default, pass a narrower path to share the app
        redirect_path: str = "/{path:path}",
    ):
        super().__init__()

        self._config = config or RedirectConfig()

        self.verify_endpoint = VerifyEndpoint(self._config.verify_path)
        self.redirect_endpoint = RedirectEndpoint(redirect_path)

        # Verify first, the redirect route would otherwise swallow it
        routes = self.verify_endpoint.routes + self.redirect_endpoint.routes

        for route in routes:
            self.add_api_route(
                route.path,
                route.to_fastapi_endpoint(self._config),
                methods=route.methods,
                operation_id=route.operation_id,
                summary=route.summary,
                include_in_schema=route.include_in_schema,
            )

        logger.debug(
            "Auth relay routes mounted for %s: %s",
            self._config.canonical_origin,
            [route.path for route in routes],
        )

    @property
    def config(self) -> RedirectConfig:
        return self._config
