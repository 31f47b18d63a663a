"""Protocol for the host-facing strategy lifecycle."""

from typing import Any, Mapping, Protocol, Union

from twitter_auth.domains.identity.types import Identity
from twitter_auth.domains.oauth.types import AuthorizationRequest, CallbackPayload
from twitter_auth.domains.strategy.context import AuthContext
from twitter_auth.domains.strategy.types import AuthResult


class AuthStrategyProtocol(Protocol):
    """Three hooks a host calls during one authentication attempt."""

    async def begin_auth(
        self, ctx: AuthContext, callback_url: str, **authorize_options: Any
    ) -> AuthResult[AuthorizationRequest]:
        """Obtain a temporary credential and the provider redirect URL."""
        ...

    async def complete_auth(
        self, ctx: AuthContext, callback: Union[CallbackPayload, Mapping[str, str]]
    ) -> AuthResult[Identity]:
        """Turn the provider callback into an identity record."""
        ...

    def cleanup(self, ctx: AuthContext) -> None:
        """Discard transient per-attempt state."""
        ...
