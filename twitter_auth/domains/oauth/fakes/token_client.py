"""Fake TokenClient for testing."""

from typing import Any, Dict, Optional

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.domains.oauth.types import Credential


class FakeTokenClient:
    """In-memory fake for TokenClientProtocol.

    Seed the credentials each step returns and inspect recorded calls for
    assertions. ``set_error`` makes the next calls raise instead.
    """

    def __init__(self) -> None:
        self._temporary: Optional[Credential] = None
        self._access: Optional[Credential] = None
        self._calls: list[tuple[Any, ...]] = []
        self._should_raise: Optional[Exception] = None

    # -- seeding helpers --

    def seed_temporary(self, key: str, secret: str, **extra: str) -> None:
        self._temporary = Credential(
            key=key, secret=secret, extra={"oauth_callback_confirmed": "true", **extra}
        )

    def seed_access(self, key: str, secret: str, **extra: str) -> None:
        self._access = Credential(key=key, secret=secret, extra=extra)

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    def clear_error(self) -> None:
        self._should_raise = None

    @property
    def calls(self) -> list[tuple[Any, ...]]:
        return list(self._calls)

    def calls_for(self, method: str) -> list[tuple[Any, ...]]:
        return [c for c in self._calls if c[0] == method]

    # -- protocol methods --

    async def request_temporary_credential(
        self,
        callback_url: str,
        extra_params: Optional[Dict[str, str]] = None,
        *,
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        self._calls.append(("request_temporary_credential", callback_url, extra_params))
        if self._should_raise:
            raise self._should_raise
        if self._temporary is None:
            raise ValueError("FakeTokenClient: seed_temporary not called")
        return self._temporary

    async def exchange_for_access_token(
        self,
        temporary_token: str,
        verifier: str,
        *,
        token_secret: str = "",
        logger: Optional[ContextualLogger] = None,
    ) -> Credential:
        self._calls.append(("exchange_for_access_token", temporary_token, verifier, token_secret))
        if self._should_raise:
            raise self._should_raise
        if self._access is None:
            raise ValueError("FakeTokenClient: seed_access not called")
        return self._access
