"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Design principles:
- Container serves, factory builds
- Type safety: fields are protocol types
- Testing: construct directly with fakes
"""

from dataclasses import dataclass, replace
from typing import Any

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.domains.identity.protocols import (
    IdentityMapperProtocol,
    ProfileFetcherProtocol,
)
from twitter_auth.domains.oauth.protocols import (
    AuthorizationURLBuilderProtocol,
    TokenClientProtocol,
)
from twitter_auth.domains.strategy.protocols import AuthStrategyProtocol


@dataclass(frozen=True)
class Container:
    """Wired components for one configured consumer."""

    settings: TwitterAuthSettings

    # OAuth domain
    token_client: TokenClientProtocol
    authorization_url_builder: AuthorizationURLBuilderProtocol

    # Identity domain
    profile_fetcher: ProfileFetcherProtocol
    identity_mapper: IdentityMapperProtocol

    # Host-facing strategy
    strategy: AuthStrategyProtocol

    def replace(self, **changes: Any) -> "Container":
        """Create a new container with some dependencies replaced.

        Useful for partial overrides in tests:

            modified = container.replace(profile_fetcher=FakeProfileFetcher())

        The strategy is not rebuilt; pass ``strategy=`` as well when its
        collaborators change.
        """
        return replace(self, **changes)
