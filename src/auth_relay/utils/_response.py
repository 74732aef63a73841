from typing import Self

from cross_web import Response as BaseResponse

from ..models.redirect_target import RedirectTarget
from ._url import append_query

NO_CACHE_HEADERS = {"Cache-Control": "no-cache"}


class Response(BaseResponse):
    @classmethod
    def target_redirect(cls, target: RedirectTarget) -> Self:
        response = cls.redirect(target.url, headers=NO_CACHE_HEADERS)
        response.body = ""

        return response

    @classmethod
    def error_redirect(
        cls,
        redirect_uri: str,
        error: str,
        error_description: str | None = None,
    ) -> Self:
        query_params = {"error": error}

        if error_description:
            query_params["error_description"] = error_description

        response = cls.redirect(
            append_query(redirect_uri, query_params), headers=NO_CACHE_HEADERS
        )
        response.body = ""

        return response
