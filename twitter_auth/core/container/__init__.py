"""Dependency Injection Container Module.

Usage:
------
    from twitter_auth.core.config import TwitterAuthSettings
    from twitter_auth.core.container import create_container

    container = create_container(TwitterAuthSettings())
    strategy = container.strategy

    # In tests (construct directly with fakes)
    from twitter_auth.core.container import Container
    test_container = container.replace(profile_fetcher=FakeProfileFetcher())
"""

from twitter_auth.core.container.container import Container
from twitter_auth.core.container.factory import create_container, create_strategy

__all__ = ["Container", "create_container", "create_strategy"]
