from .models.callback_request import IncomingCallbackRequest, LinkType


def classify(request: IncomingCallbackRequest) -> LinkType:
    """Tell recovery links apart from everything else.

    Never fails: anything that isn't a recovery link with a token is
    ``LinkType.OTHER``, callers decide whether that is an error.
    """
    if request.token and request.type == LinkType.RECOVERY.value:
        return LinkType.RECOVERY

    return LinkType.OTHER
