"""Twitter strategy: drives the OAuth 1.0a handshake for a host application.

Owns the order of operations across one attempt:
1. ``begin_auth``: temporary credential + authorize URL
2. ``complete_auth``: verifier exchange (or direct token), profile fetch,
   identity mapping
3. ``cleanup``: drop transient state from the caller's context

Handshake errors are returned as ``AuthResult`` failures, never raised.
"""

from typing import Any, Mapping, Union

from twitter_auth.core.exceptions import AuthError, MissingCallbackCode
from twitter_auth.domains.identity.protocols import (
    IdentityMapperProtocol,
    ProfileFetcherProtocol,
)
from twitter_auth.domains.identity.types import Identity
from twitter_auth.domains.oauth.protocols import (
    AuthorizationURLBuilderProtocol,
    TokenClientProtocol,
)
from twitter_auth.domains.oauth.types import (
    AuthorizationRequest,
    CallbackPayload,
    Credential,
    DirectToken,
    UnrecognizedCallback,
    VerifierCallback,
    parse_callback_params,
)
from twitter_auth.domains.strategy.context import AuthContext
from twitter_auth.domains.strategy.types import AuthResult


class TwitterStrategy:
    """Implements ``AuthStrategyProtocol`` on top of the OAuth and identity domains."""

    def __init__(
        self,
        *,
        token_client: TokenClientProtocol,
        authorization_url_builder: AuthorizationURLBuilderProtocol,
        profile_fetcher: ProfileFetcherProtocol,
        identity_mapper: IdentityMapperProtocol,
    ) -> None:
        """Store collaborators for begin/complete orchestration."""
        self._token_client = token_client
        self._authorization_url_builder = authorization_url_builder
        self._profile_fetcher = profile_fetcher
        self._identity_mapper = identity_mapper

    # ------------------------------------------------------------------
    # Begin
    # ------------------------------------------------------------------

    async def begin_auth(
        self, ctx: AuthContext, callback_url: str, **authorize_options: Any
    ) -> AuthResult[AuthorizationRequest]:
        """Obtain a temporary credential and build the provider redirect.

        Args:
            ctx: Per-attempt context; receives the temporary credential and URL
            callback_url: Where the provider redirects after authorization
            **authorize_options: ``force_login`` / ``screen_name`` for the URL

        Returns:
            AuthResult wrapping the AuthorizationRequest
        """
        try:
            temporary = await self._token_client.request_temporary_credential(
                callback_url, logger=ctx.logger
            )
        except AuthError as e:
            ctx.logger.warning(f"Handshake aborted at request token: {e.key}")
            return AuthResult.failure(e)

        authorize_url = self._authorization_url_builder.build_url(
            temporary, **authorize_options
        )
        ctx.temporary_credential = temporary
        ctx.authorize_url = authorize_url

        ctx.logger.info("Handshake started, redirecting user to provider")
        return AuthResult.success(
            AuthorizationRequest(
                temporary_credential=temporary,
                callback_url=callback_url,
                authorize_url=authorize_url,
            )
        )

    # ------------------------------------------------------------------
    # Complete
    # ------------------------------------------------------------------

    async def complete_auth(
        self, ctx: AuthContext, callback: Union[CallbackPayload, Mapping[str, str]]
    ) -> AuthResult[Identity]:
        """Turn the provider callback into an identity record.

        Args:
            ctx: Per-attempt context from ``begin_auth`` (or a fresh one for
                direct tokens)
            callback: Parsed payload or the raw callback query parameters

        Returns:
            AuthResult wrapping the Identity
        """
        payload = (
            callback
            if isinstance(callback, (VerifierCallback, DirectToken, UnrecognizedCallback))
            else parse_callback_params(callback)
        )

        try:
            match payload:
                case VerifierCallback(token=token, verifier=verifier):
                    access = await self._token_client.exchange_for_access_token(
                        token,
                        verifier,
                        token_secret=self._temporary_secret(ctx, token),
                        logger=ctx.logger,
                    )
                case DirectToken(token=token, secret=secret):
                    ctx.logger.debug("Using directly supplied access token")
                    access = Credential(key=token, secret=secret)
                case _:
                    raise MissingCallbackCode()

            profile = await self._profile_fetcher.fetch(access, logger=ctx.logger)
        except AuthError as e:
            ctx.logger.warning(f"Handshake failed: {e.key}: {e.message}")
            return AuthResult.failure(e)

        identity = self._identity_mapper.to_identity(profile, access)
        ctx.access_credential = access
        ctx.profile = profile
        ctx.identity = identity

        ctx.logger.info(f"Handshake completed for uid={identity.uid or '-'}")
        return AuthResult.success(identity)

    @staticmethod
    def _temporary_secret(ctx: AuthContext, token: str) -> str:
        """Temporary secret from ``begin_auth``, when it belongs to ``token``."""
        temporary = ctx.temporary_credential
        if temporary is not None and temporary.key == token:
            return temporary.secret
        return ""

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def cleanup(self, ctx: AuthContext) -> None:
        """Discard transient per-attempt state."""
        ctx.clear()
        ctx.logger.debug("Handshake state cleared")
