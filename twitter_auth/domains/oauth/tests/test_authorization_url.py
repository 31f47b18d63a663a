"""Unit tests for AuthorizationURLBuilder."""

from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit

import pytest

from twitter_auth.core.exceptions import ConfigurationError
from twitter_auth.domains.oauth.authorization_url import AuthorizationURLBuilder
from twitter_auth.domains.oauth.types import Credential

AUTHORIZE_URL = "https://api.twitter.com/oauth/authorize"
TEMPORARY = Credential(key="tok123", secret="temporary-secret")


@dataclass
class AuthUrlCase:
    desc: str
    kwargs: dict
    expect_query: dict
    expect_not_contains: list = field(default_factory=list)


AUTH_URL_CASES = [
    AuthUrlCase(
        "minimal, token only",
        {},
        {"oauth_token": ["tok123"]},
        ["force_login=", "screen_name="],
    ),
    AuthUrlCase(
        "force login",
        {"force_login": True},
        {"oauth_token": ["tok123"], "force_login": ["true"]},
        ["screen_name="],
    ),
    AuthUrlCase(
        "screen name prefill",
        {"screen_name": "jack"},
        {"oauth_token": ["tok123"], "screen_name": ["jack"]},
        ["force_login="],
    ),
]


@pytest.mark.parametrize("case", AUTH_URL_CASES, ids=lambda c: c.desc)
def test_build_url(case: AuthUrlCase):
    url = AuthorizationURLBuilder(AUTHORIZE_URL).build_url(TEMPORARY, **case.kwargs)
    assert url.startswith(f"{AUTHORIZE_URL}?")
    assert parse_qs(urlsplit(url).query) == case.expect_query
    for fragment in case.expect_not_contains:
        assert fragment not in url


def test_secret_never_in_url():
    url = AuthorizationURLBuilder(AUTHORIZE_URL).build_url(TEMPORARY, force_login=True)
    assert "temporary-secret" not in url


def test_existing_query_preserved():
    builder = AuthorizationURLBuilder("https://provider.test/authorize?lang=en")
    url = builder.build_url(TEMPORARY)
    assert parse_qs(urlsplit(url).query) == {"lang": ["en"], "oauth_token": ["tok123"]}


def test_token_is_url_encoded():
    url = AuthorizationURLBuilder(AUTHORIZE_URL).build_url(Credential(key="a b&c", secret="s"))
    assert "oauth_token=a+b%26c" in url


@pytest.mark.parametrize("bad_url", ["", "api.twitter.com/oauth/authorize", "ftp://x/authorize"])
def test_invalid_authorize_url_is_configuration_error(bad_url: str):
    with pytest.raises(ConfigurationError):
        AuthorizationURLBuilder(bad_url)
