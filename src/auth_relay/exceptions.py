class AuthRelayException(Exception):
    def __init__(self, error: str, error_description: str | None = None) -> None:
        super().__init__(error_description or error)

        self.error = error
        self.error_description = error_description


class InvalidLinkError(AuthRelayException):
    """The verify link is missing its token or is not a recovery link."""

    def __init__(self, error_description: str | None = None) -> None:
        super().__init__("invalid_link", error_description)


class MalformedHintError(AuthRelayException):
    """``redirect_to`` could not be parsed as a URL."""

    def __init__(self, error_description: str | None = None) -> None:
        super().__init__("malformed_hint", error_description)
