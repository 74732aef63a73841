"""Recovery link verification endpoint.

The identity provider's password-reset emails point here. Tokens are not
checked server side: the link is handed to the application's callback page,
where the client SDK exchanges it for a session.
"""

import logging
from typing import cast

from cross_web import AsyncHTTPRequest

from ._classifier import classify
from ._config import RedirectConfig
from ._merger import merge
from ._route import Route
from .exceptions import InvalidLinkError
from .models.callback_request import IncomingCallbackRequest, LinkType
from .models.redirect_target import RedirectTarget
from .utils._response import Response

logger = logging.getLogger(__name__)


class VerifyEndpoint:
    def __init__(self, path: str = "/auth/v1/verify"):
        self.path = path

    def _recovery_target(
        self, callback_request: IncomingCallbackRequest, config: RedirectConfig
    ) -> RedirectTarget:
        if classify(callback_request) is not LinkType.RECOVERY:
            raise InvalidLinkError("A recovery link needs a token and type=recovery")

        # Recovery links always carry a token
        token = cast(str, callback_request.token)

        target = RedirectTarget(host=config.canonical_host, path=config.callback_path)

        return merge(
            target,
            {
                "token": token,
                "type": LinkType.RECOVERY.value,
                "flow": LinkType.RECOVERY.value,
            },
            extra_keys=("flow",),
        )

    async def verify(
        self, request: AsyncHTTPRequest, config: RedirectConfig
    ) -> Response:
        login_url = f"{config.canonical_origin}{config.login_path}"

        try:
            callback_request = IncomingCallbackRequest.from_query_params(
                request.query_params
            )

            logger.info(
                "Auth verify received: token=%s type=%s redirect_to=%s",
                callback_request.token is not None,
                callback_request.type,
                callback_request.redirect_to,
            )

            target = self._recovery_target(callback_request, config)
        except InvalidLinkError as e:
            logger.warning("Rejected verify link: %s", e.error_description)

            return Response.error_redirect(login_url, config.invalid_link_message)
        except Exception:
            logger.exception("Auth verify error")

            return Response.error_redirect(login_url, config.verify_failure_message)

        logger.info("Sending recovery link to %s", target.path)

        return Response.target_redirect(target)

    @property
    def routes(self) -> list[Route]:
        return [
            Route(
                path=self.path,
                methods=["GET"],
                function=self.verify,
                operation_id="verify",
                summary="Forward a recovery link to the callback page",
            ),
        ]
