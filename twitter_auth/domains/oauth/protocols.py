"""Protocols for OAuth domain dependencies."""

from typing import Dict, Optional, Protocol

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.domains.oauth.types import Credential


class TokenClientProtocol(Protocol):
    """OAuth1 temporary-credential and access-token capability."""

    async def request_temporary_credential(
        self,
        callback_url: str,
        extra_params: Optional[Dict[str, str]] = None,
        *,
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        """Obtain temporary credentials (request token)."""
        ...

    async def exchange_for_access_token(
        self,
        temporary_token: str,
        verifier: str,
        *,
        token_secret: str = "",
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        """Exchange temporary credentials for access token credentials."""
        ...


class AuthorizationURLBuilderProtocol(Protocol):
    """Builds the provider redirect for user consent."""

    def build_url(
        self,
        temporary_credential: Credential,
        *,
        force_login: bool = False,
        screen_name: Optional[str] = None,
    ) -> str:
        """Build the authorization URL for a temporary credential."""
        ...
