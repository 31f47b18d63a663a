"""OAuth1 token round-trips.

Handles steps 1 and 3 of the 3-legged OAuth1 flow:
1. Obtain temporary credentials (request token)
3. Exchange the temporary token and verifier for access token credentials

Step 2 (user authorization) is a browser redirect, see ``authorization_url``.

Reference: RFC 5849 - The OAuth 1.0 Protocol
"""

from typing import Dict, Optional
from urllib.parse import parse_qsl

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.core.exceptions import ProtocolViolation
from twitter_auth.core.logging import ContextualLogger
from twitter_auth.core.logging import logger as default_logger
from twitter_auth.domains.oauth.error_classifier import classify_token_error
from twitter_auth.domains.oauth.transport import SignedTransport, token_fingerprint
from twitter_auth.domains.oauth.types import Credential


def parse_credential_body(body: str) -> Credential:
    """Parse an ``oauth_token=...&oauth_token_secret=...`` response body.

    Raises:
        ProtocolViolation: If the body is not form-encoded or lacks the token pair
    """
    params: Dict[str, str] = dict(parse_qsl(body.strip(), keep_blank_values=True))

    token = params.pop("oauth_token", "")
    secret = params.pop("oauth_token_secret", "")
    if not token or not secret:
        raise ProtocolViolation("Provider response is missing oauth_token or oauth_token_secret")

    return Credential(key=token, secret=secret, extra=params)


class TokenClient:
    """Requests temporary credentials and exchanges them for access credentials."""

    def __init__(
        self,
        settings: TwitterAuthSettings,
        transport: SignedTransport,
        *,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Store endpoint settings and the signed transport."""
        self._settings = settings
        self._transport = transport
        self._logger = logger or default_logger

    async def request_temporary_credential(
        self,
        callback_url: str,
        extra_params: Optional[Dict[str, str]] = None,
        *,
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        """Obtain temporary credentials (request token) from the provider.

        Args:
            callback_url: Where the provider sends the user after authorization
            extra_params: Additional request parameters (e.g. ``x_auth_access_type``)
            logger: Logger for the current handshake

        Returns:
            Temporary Credential

        Raises:
            TransportError: If the provider could not be reached
            ProviderError: If the provider rejected the request
            ProtocolViolation: If the response is unparsable or unconfirmed
        """
        log = logger or self._logger
        url = self._settings.request_token_url
        params = {**(extra_params or {}), "oauth_callback": callback_url}

        log.info(f"Requesting OAuth1 temporary credentials from {url}")
        response = await self._transport.request("POST", url, params=params, logger=log)

        if not response.is_success:
            error = classify_token_error(response.status_code, response.text)
            log.error(
                f"Request token rejected: {response.status_code} "
                f"code={error.code} reason={error.reason}"
            )
            raise error

        credential = parse_credential_body(response.text)
        if credential.extra.get("oauth_callback_confirmed") != "true":
            log.error("Request token response did not confirm the callback")
            raise ProtocolViolation("Provider did not confirm oauth_callback")

        log.info(
            f"Obtained OAuth1 temporary credentials token={token_fingerprint(credential.key)}"
        )
        return credential

    async def exchange_for_access_token(
        self,
        temporary_token: str,
        verifier: str,
        *,
        token_secret: str = "",
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        """Exchange a temporary token and verifier for access credentials.

        Args:
            temporary_token: Token from the request-token step
            verifier: Verifier returned on the callback
            token_secret: Temporary secret, when the caller still has it
            logger: Logger for the current handshake

        Returns:
            Access Credential; extra response fields land in ``Credential.extra``

        Raises:
            TransportError: If the provider could not be reached
            ProviderError: If the provider rejected the exchange
            ProtocolViolation: If the response body is unparsable
        """
        log = logger or self._logger
        url = self._settings.access_token_url

        log.info(
            f"Exchanging OAuth1 temporary token={token_fingerprint(temporary_token)} "
            f"for access token at {url}"
        )
        response = await self._transport.request(
            "POST",
            url,
            params={"oauth_verifier": verifier},
            token=temporary_token,
            token_secret=token_secret,
            logger=log,
        )

        if not response.is_success:
            error = classify_token_error(response.status_code, response.text)
            log.error(
                f"Access token exchange rejected: {response.status_code} "
                f"code={error.code} reason={error.reason}"
            )
            raise error

        credential = parse_credential_body(response.text)
        log.info(f"Obtained OAuth1 access token={token_fingerprint(credential.key)}")
        return credential
