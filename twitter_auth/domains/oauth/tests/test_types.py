"""Unit tests for OAuth value types and callback parsing."""

from dataclasses import dataclass
from typing import Optional

import pytest
from pydantic import ValidationError

from twitter_auth.domains.oauth.types import (
    Credential,
    DirectToken,
    UnrecognizedCallback,
    VerifierCallback,
    parse_callback_params,
)


@dataclass
class CallbackCase:
    desc: str
    params: Optional[dict]
    expected: object


CALLBACK_CASES = [
    CallbackCase(
        "verifier shape",
        {"oauth_token": "t", "oauth_verifier": "v"},
        VerifierCallback(token="t", verifier="v"),
    ),
    CallbackCase(
        "direct token shape",
        {"token": "t", "token_secret": "s"},
        DirectToken(token="t", secret="s"),
    ),
    CallbackCase(
        "verifier wins when both present",
        {"oauth_token": "t", "oauth_verifier": "v", "token": "x", "token_secret": "y"},
        VerifierCallback(token="t", verifier="v"),
    ),
    CallbackCase(
        "token without verifier",
        {"oauth_token": "t"},
        UnrecognizedCallback(params={"oauth_token": "t"}),
    ),
    CallbackCase(
        "empty verifier",
        {"oauth_token": "t", "oauth_verifier": ""},
        UnrecognizedCallback(params={"oauth_token": "t", "oauth_verifier": ""}),
    ),
    CallbackCase(
        "denied callback",
        {"denied": "abc"},
        UnrecognizedCallback(params={"denied": "abc"}),
    ),
    CallbackCase(
        "secret dropped from unrecognized params",
        {"token_secret": "s"},
        UnrecognizedCallback(params={}),
    ),
    CallbackCase("no params", None, UnrecognizedCallback(params={})),
]


@pytest.mark.parametrize("case", CALLBACK_CASES, ids=lambda c: c.desc)
def test_parse_callback_params(case: CallbackCase):
    assert parse_callback_params(case.params) == case.expected


def test_credential_repr_hides_secret():
    credential = Credential(key="tok", secret="very-secret")
    assert "very-secret" not in repr(credential)
    assert "very-secret" not in str(credential)
    assert "tok" in repr(credential)


def test_direct_token_repr_hides_secret():
    assert "very-secret" not in repr(DirectToken(token="t", secret="very-secret"))


def test_credential_is_immutable():
    credential = Credential(key="tok", secret="s")
    with pytest.raises(ValidationError):
        credential.key = "other"
