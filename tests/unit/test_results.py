"""Unit tests for AuthResult and the AuthError hierarchy."""

import pytest

from twitter_auth.core.exceptions import (
    AuthError,
    MalformedResponse,
    MissingCallbackCode,
    ProtocolViolation,
    ProviderError,
    TransportError,
    TwitterAuthException,
    Unauthorized,
)
from twitter_auth.domains.strategy.types import AuthResult


@pytest.mark.parametrize(
    "error_cls",
    [TransportError, ProtocolViolation, MalformedResponse, Unauthorized, ProviderError,
     MissingCallbackCode],
)
def test_handshake_errors_share_a_base(error_cls):
    error = error_cls()
    assert isinstance(error, AuthError)
    assert isinstance(error, TwitterAuthException)


def test_default_keys():
    assert Unauthorized().to_dict() == {"message_key": "token", "message": "unauthorized"}
    assert MissingCallbackCode().to_dict() == {
        "message_key": "missing_code",
        "message": "No code received",
    }
    assert TransportError("down").key == "transport_error"


def test_provider_error_code_and_reason_alias_key_and_message():
    error = ProviderError("Invalid or expired token.", key="89", status_code=401, body="{}")
    assert (error.code, error.reason) == ("89", "Invalid or expired token.")
    assert str(error) == "89: Invalid or expired token."


def test_success_result():
    result = AuthResult.success("value")
    assert result.ok
    assert result.errors == []
    assert result.unwrap() == "value"


def test_failure_result():
    error = ProviderError("", key="Invalid request token.")
    result = AuthResult.failure(error)

    assert not result.ok
    assert result.value is None
    assert result.errors == [{"message_key": "Invalid request token.", "message": ""}]
    with pytest.raises(ProviderError):
        result.unwrap()
