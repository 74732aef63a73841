from auth_relay._classifier import classify
from auth_relay._config import RedirectConfig
from auth_relay._merger import FORWARDED_PARAMS, extract_forwarded_params, merge
from auth_relay._redirect import RedirectEndpoint
from auth_relay._resolver import default_target, resolve
from auth_relay._verify import VerifyEndpoint
from auth_relay.diagnostics import LandingDiagnostics, collect_landing_diagnostics
from auth_relay.models.callback_request import IncomingCallbackRequest, LinkType
from auth_relay.models.redirect_target import RedirectTarget
from auth_relay.router import AuthRelayRouter

__all__ = [
    "FORWARDED_PARAMS",
    "AuthRelayRouter",
    "IncomingCallbackRequest",
    "LandingDiagnostics",
    "LinkType",
    "RedirectConfig",
    "RedirectEndpoint",
    "RedirectTarget",
    "VerifyEndpoint",
    "classify",
    "collect_landing_diagnostics",
    "default_target",
    "extract_forwarded_params",
    "merge",
    "resolve",
]
