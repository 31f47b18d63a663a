"""Fake ProfileFetcher for testing."""

from typing import Any, Optional

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.domains.identity.types import Profile
from twitter_auth.domains.oauth.types import Credential


class FakeProfileFetcher:
    """In-memory fake for ProfileFetcherProtocol."""

    def __init__(self) -> None:
        self._profile: Optional[Profile] = None
        self._calls: list[tuple[Any, ...]] = []
        self._should_raise: Optional[Exception] = None

    def seed_profile(self, profile: Profile) -> None:
        self._profile = profile

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    @property
    def calls(self) -> list[tuple[Any, ...]]:
        return list(self._calls)

    async def fetch(
        self,
        credential: Credential,
        *,
        include_email: bool = True,
        include_entities: bool = False,
        skip_status: bool = True,
        logger: Optional[ContextualLogger] = None,
    ) -> Profile:
        self._calls.append(("fetch", credential.key, credential.secret))
        if self._should_raise:
            raise self._should_raise
        if self._profile is None:
            raise ValueError("FakeProfileFetcher: seed_profile not called")
        return self._profile
