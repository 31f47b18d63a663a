"""Value types for the OAuth domain.

These live in a separate module to avoid circular imports between
service implementations and protocol definitions.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Credential(BaseModel):
    """OAuth 1.0a token/secret pair (temporary or access)."""

    model_config = ConfigDict(frozen=True)

    key: str
    secret: str = Field(repr=False)
    extra: Dict[str, str] = Field(default_factory=dict)


class AuthorizationRequest(BaseModel):
    """Outcome of starting a handshake: where to send the user."""

    model_config = ConfigDict(frozen=True)

    temporary_credential: Credential
    callback_url: str
    authorize_url: str


@dataclass(frozen=True, slots=True)
class VerifierCallback:
    """Provider-driven callback carrying the temporary token and verifier."""

    token: str
    verifier: str


@dataclass(frozen=True, slots=True)
class DirectToken:
    """Pre-obtained access token pair that bypasses the verifier step."""

    token: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class UnrecognizedCallback:
    """Callback parameters that match neither known shape."""

    params: Mapping[str, str] = field(default_factory=dict)


CallbackPayload = Union[VerifierCallback, DirectToken, UnrecognizedCallback]


def parse_callback_params(params: Optional[Mapping[str, str]]) -> CallbackPayload:
    """Classify raw callback query parameters.

    The verifier shape wins when both shapes are present. Empty values count
    as missing.
    """
    params = params or {}
    oauth_token = params.get("oauth_token")
    oauth_verifier = params.get("oauth_verifier")
    if oauth_token and oauth_verifier:
        return VerifierCallback(token=oauth_token, verifier=oauth_verifier)

    token = params.get("token")
    token_secret = params.get("token_secret")
    if token and token_secret:
        return DirectToken(token=token, secret=token_secret)

    # Secret-like params are never retained.
    safe = {k: v for k, v in params.items() if "secret" not in k}
    return UnrecognizedCallback(params=safe)
