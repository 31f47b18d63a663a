"""Fetches the authenticated user's profile with a signed GET."""

import json
from typing import Optional

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.core.exceptions import MalformedResponse
from twitter_auth.core.logging import ContextualLogger
from twitter_auth.core.logging import logger as default_logger
from twitter_auth.domains.identity.types import Profile
from twitter_auth.domains.oauth.error_classifier import classify_profile_response
from twitter_auth.domains.oauth.transport import SignedTransport
from twitter_auth.domains.oauth.types import Credential


class ProfileFetcher:
    """Reads ``verify_credentials`` for an access credential."""

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

    async def fetch(
        self,
        credential: Credential,
        *,
        include_email: bool = True,
        include_entities: bool = False,
        skip_status: bool = True,
        logger: Optional[ContextualLogger] = None,
    ) -> Profile:
        """Fetch the profile of the user owning ``credential``.

        Args:
            credential: Access credential
            include_email: Ask for the account email (needs app permission)
            include_entities: Include the entities node
            skip_status: Leave out the user's latest status
            logger: Logger for the current handshake

        Returns:
            The profile mapping exactly as returned by the provider

        Raises:
            TransportError: If the provider could not be reached
            Unauthorized: On HTTP 401
            ProviderError: If the provider returned an errors envelope
            MalformedResponse: If the body cannot be interpreted
        """
        log = logger or self._logger
        url = self._settings.profile_url
        params = [
            ("include_entities", include_entities),
            ("skip_status", skip_status),
            ("include_email", include_email),
        ]

        response = await self._transport.request(
            "GET", url, params=params, credential=credential, logger=log
        )

        error = classify_profile_response(response.status_code, response.text)
        if error is not None:
            log.warning(
                f"Profile fetch failed: {response.status_code} {error.key}: {error.message}"
            )
            raise error

        try:
            profile = json.loads(response.text)
        except ValueError as e:
            raise MalformedResponse(
                "Profile response is not valid JSON",
                key="token",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(profile, dict):
            raise MalformedResponse(
                "Profile response is not a JSON object",
                key="token",
                status_code=response.status_code,
                body=response.text,
            )

        log.debug(f"Fetched profile with {len(profile)} fields")
        return profile
