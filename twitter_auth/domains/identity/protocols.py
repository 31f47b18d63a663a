"""Protocols for identity domain dependencies."""

from typing import Any, Mapping, Optional, Protocol

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.domains.identity.types import Identity, Profile
from twitter_auth.domains.oauth.types import Credential


class ProfileFetcherProtocol(Protocol):
    """Reads the authenticated user's profile."""

    async def fetch(
        self,
        credential: Credential,
        *,
        include_email: bool = True,
        include_entities: bool = False,
        skip_status: bool = True,
        logger: Optional[ContextualLogger] = None,
    ) -> Profile:
        """Fetch the profile of the user owning ``credential``."""
        ...


class IdentityMapperProtocol(Protocol):
    """Normalizes a raw profile into an identity record."""

    def to_identity(self, profile: Mapping[str, Any], credential: Credential) -> Identity:
        """Assemble the identity for a profile and its access credential."""
        ...
