"""Twitter sign-in over OAuth 1.0a.

Hosts build a strategy once and drive each attempt through a fresh
``AuthContext``::

    strategy = create_strategy(TwitterAuthSettings())
    ctx = AuthContext()
    started = await strategy.begin_auth(ctx, "https://app.example.com/auth/twitter/callback")
    ...
    result = await strategy.complete_auth(ctx, request.query_params)
    strategy.cleanup(ctx)
"""

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.core.container import Container, create_container, create_strategy
from twitter_auth.core.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidArgumentError,
    MalformedResponse,
    MissingCallbackCode,
    ProtocolViolation,
    ProviderError,
    TransportError,
    Unauthorized,
)
from twitter_auth.domains.identity.types import Credentials, Identity, Info
from twitter_auth.domains.oauth.types import (
    AuthorizationRequest,
    Credential,
    DirectToken,
    UnrecognizedCallback,
    VerifierCallback,
    parse_callback_params,
)
from twitter_auth.domains.strategy.context import AuthContext
from twitter_auth.domains.strategy.service import TwitterStrategy
from twitter_auth.domains.strategy.types import AuthResult

__all__ = [
    # Configuration and wiring
    "TwitterAuthSettings",
    "Container",
    "create_container",
    "create_strategy",
    # Strategy
    "AuthContext",
    "AuthResult",
    "TwitterStrategy",
    # Values
    "AuthorizationRequest",
    "Credential",
    "Credentials",
    "DirectToken",
    "Identity",
    "Info",
    "UnrecognizedCallback",
    "VerifierCallback",
    "parse_callback_params",
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MalformedResponse",
    "MissingCallbackCode",
    "ProtocolViolation",
    "ProviderError",
    "TransportError",
    "Unauthorized",
]
