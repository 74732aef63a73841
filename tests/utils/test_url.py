from auth_relay.utils._url import append_query, build_url, encode_query


def test_spaces_are_percent_encoded():
    """Spaces use %20, not +."""
    assert encode_query({"error": "Invalid reset link"}) == "error=Invalid%20reset%20link"


def test_reserved_characters_are_escaped():
    assert encode_query({"token": "a/b+c=d&e"}) == "token=a%2Fb%2Bc%3Dd%26e"


def test_build_url_without_params():
    assert build_url("https", "bwcarpe.com", "/reset-password") == (
        "https://bwcarpe.com/reset-password"
    )


def test_build_url_with_params():
    url = build_url("https", "bwcarpe.com", "/auth/callback", {"code": "c", "type": "x"})

    assert url == "https://bwcarpe.com/auth/callback?code=c&type=x"


def test_build_url_with_empty_path():
    assert build_url("https", "bwcarpe.com", "") == "https://bwcarpe.com/"


def test_append_query():
    assert append_query("https://bwcarpe.com/auth", {"error": "nope"}) == (
        "https://bwcarpe.com/auth?error=nope"
    )


def test_append_query_to_existing_query():
    assert append_query("https://bwcarpe.com/auth?lang=fr", {"error": "nope"}) == (
        "https://bwcarpe.com/auth?lang=fr&error=nope"
    )


def test_append_nothing():
    assert append_query("https://bwcarpe.com/auth", {}) == "https://bwcarpe.com/auth"
