import pytest
from pydantic import ValidationError

from auth_relay._config import RedirectConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("CANONICAL_HOST", "DEFAULT_PATH", "LOGIN_PATH", "CALLBACK_PATH"):
        monkeypatch.delenv(f"AUTH_RELAY_{name}", raising=False)

    config = RedirectConfig()

    assert config.canonical_origin == "https://bwcarpe.com"
    assert config.default_path == "/reset-password"
    assert config.login_paths == {"/auth", "/auth/"}
    assert config.callback_path == "/auth/callback"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AUTH_RELAY_CANONICAL_HOST", "App.Example.com")
    monkeypatch.setenv("AUTH_RELAY_DEFAULT_PATH", "/welcome")

    config = RedirectConfig()

    assert config.canonical_host == "app.example.com"
    assert config.canonical_origin == "https://app.example.com"
    assert config.default_path == "/welcome"


def test_host_with_port_is_allowed():
    config = RedirectConfig(canonical_host="localhost:5173")

    assert config.canonical_origin == "https://localhost:5173"


@pytest.mark.parametrize(
    "host",
    [
        "",
        "https://bwcarpe.com",
        "bwcarpe.com/auth",
        "user@bwcarpe.com",
        "a b",
        "bwcarpe.com:abc",
        "a:b:c",
        "bwcarpe.com:",
        "bwcarpe.com:0",
        "bwcarpe.com:99999",
        ":443",
    ],
)
def test_rejects_anything_but_a_bare_host(host: str):
    with pytest.raises(ValidationError):
        RedirectConfig(canonical_host=host)


def test_paths_must_be_absolute():
    with pytest.raises(ValidationError):
        RedirectConfig(callback_path="auth/callback")


def test_login_paths_ignore_a_trailing_slash():
    assert RedirectConfig(login_path="/login/").login_paths == {"/login", "/login/"}


def test_is_frozen():
    config = RedirectConfig()

    with pytest.raises(ValidationError):
        config.canonical_host = "evil.example"  # type: ignore[misc]
