"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container.

Design principles:
- Single place for all wiring decisions
- Fail fast: broken configuration raises at construction, not mid-handshake
- Testable: pass an httpx transport to keep every round-trip in-process
"""

from typing import Optional

import httpx

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.core.container.container import Container
from twitter_auth.core.exceptions import ConfigurationError
from twitter_auth.core.logging import LoggerConfigurator, logger
from twitter_auth.domains.identity.mapper import IdentityMapper
from twitter_auth.domains.identity.profile_fetcher import ProfileFetcher
from twitter_auth.domains.oauth.authorization_url import AuthorizationURLBuilder
from twitter_auth.domains.oauth.signer import OAuth1Signer
from twitter_auth.domains.oauth.token_client import TokenClient
from twitter_auth.domains.oauth.transport import SignedTransport
from twitter_auth.domains.strategy.protocols import AuthStrategyProtocol
from twitter_auth.domains.strategy.service import TwitterStrategy


def create_container(
    settings: TwitterAuthSettings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    configure_logging: bool = False,
) -> Container:
    """Build a container for the configured consumer.

    Args:
        settings: Strategy settings (from core/config.py)
        transport: Optional httpx transport shared by every provider call
        configure_logging: Install the package log handler from settings

    Returns:
        Fully constructed Container ready for use

    Raises:
        ConfigurationError: If the consumer credentials or endpoints are unusable
    """
    if configure_logging:
        LoggerConfigurator.setup(settings.log_level, settings.log_format)

    consumer_secret = settings.consumer_secret.get_secret_value()
    if not settings.consumer_key or not consumer_secret:
        raise ConfigurationError("consumer_key and consumer_secret must be configured")

    signer = OAuth1Signer(settings.consumer_key, consumer_secret)
    signed_transport = SignedTransport(
        signer, timeout=settings.http_timeout, transport=transport, logger=logger
    )

    token_client = TokenClient(settings, signed_transport, logger=logger)
    authorization_url_builder = AuthorizationURLBuilder(settings.authorize_url)
    profile_fetcher = ProfileFetcher(settings, signed_transport, logger=logger)
    identity_mapper = IdentityMapper(uid_field=settings.uid_field)

    strategy = TwitterStrategy(
        token_client=token_client,
        authorization_url_builder=authorization_url_builder,
        profile_fetcher=profile_fetcher,
        identity_mapper=identity_mapper,
    )

    logger.debug(f"Twitter strategy wired for {settings.api_url} uid_field={settings.uid_field}")

    return Container(
        settings=settings,
        token_client=token_client,
        authorization_url_builder=authorization_url_builder,
        profile_fetcher=profile_fetcher,
        identity_mapper=identity_mapper,
        strategy=strategy,
    )


def create_strategy(
    settings: Optional[TwitterAuthSettings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AuthStrategyProtocol:
    """Shortcut returning only the wired strategy; settings default to the environment."""
    return create_container(settings or TwitterAuthSettings(), transport=transport).strategy
