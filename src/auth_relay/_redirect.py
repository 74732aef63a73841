"""Generic identity-provider callback redirect.

Forwards whatever combination of token, token_hash, code and error
parameters the provider sent to the application, without interpreting the
flow. The client decides what to do with them.
"""

import logging

from cross_web import AsyncHTTPRequest

from ._config import RedirectConfig
from ._merger import extract_forwarded_params, merge
from ._resolver import default_target, resolve
from ._route import ALL_METHODS, Route
from .utils._response import Response

logger = logging.getLogger(__name__)


class RedirectEndpoint:
    def __init__(self, path: str = "/{path:path}"):
        self.path = path

    async def redirect(
        self, request: AsyncHTTPRequest, config: RedirectConfig
    ) -> Response:
        try:
            forwarded = extract_forwarded_params(request.query_params)
            redirect_to = request.query_params.get("redirect_to") or None

            logger.info(
                "Redirect called with params=%s redirect_to=%s",
                sorted(forwarded),
                redirect_to,
            )

            target = merge(resolve(redirect_to, config), forwarded)
        except Exception:
            logger.exception("Failed to build redirect target, using default")

            target = default_target(config)

        logger.info(
            "Redirecting to %s with params=%s", target.path, sorted(target.params)
        )

        return Response.target_redirect(target)

    @property
    def routes(self) -> list[Route]:
        return [
            Route(
                path=self.path,
                methods=ALL_METHODS,
                function=self.redirect,
                operation_id="redirect",
                summary="Forward identity-provider callbacks to the application",
                include_in_schema=False,
            ),
        ]
