from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from auth_relay._config import CANONICAL_SCHEME
from auth_relay.utils._url import build_url


@dataclass(frozen=True)
class RedirectTarget:
    """Where the browser is sent next.

    Targets are built fresh for every request and replaced, never mutated,
    when parameters are merged in. ``params`` is a read-only view.
    """

    host: str
    path: str
    params: Mapping[str, str] = field(default_factory=dict)
    scheme: str = CANONICAL_SCHEME

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def url(self) -> str:
        return build_url(self.scheme, self.host, self.path, self.params)
