"""Unit tests for the container factory."""

import pytest

from twitter_auth.core.config import TwitterAuthSettings
from twitter_auth.core.container import Container, create_container, create_strategy
from twitter_auth.core.exceptions import ConfigurationError
from twitter_auth.domains.identity.mapper import IdentityMapper
from twitter_auth.domains.strategy.service import TwitterStrategy


def test_create_container_wires_strategy(settings):
    container = create_container(settings)

    assert isinstance(container, Container)
    assert isinstance(container.strategy, TwitterStrategy)
    assert container.settings is settings


def test_uid_field_flows_into_mapper(settings):
    container = create_container(settings.with_overrides(uid_field="screen_name"))

    assert isinstance(container.identity_mapper, IdentityMapper)
    assert container.identity_mapper.uid_field == "screen_name"


@pytest.mark.parametrize(
    "overrides",
    [{"consumer_key": ""}, {"consumer_secret": ""}],
    ids=["missing-key", "missing-secret"],
)
def test_missing_consumer_credentials_fail_fast(settings, overrides):
    with pytest.raises(ConfigurationError):
        create_container(settings.with_overrides(**overrides))


def test_invalid_authorize_endpoint_fails_fast(settings):
    with pytest.raises(ConfigurationError):
        create_container(settings.with_overrides(authorize_path="ftp://provider.test/authorize"))


def test_replace_swaps_components(settings, fake_profile_fetcher):
    container = create_container(settings)
    replaced = container.replace(profile_fetcher=fake_profile_fetcher)

    assert replaced.profile_fetcher is fake_profile_fetcher
    assert container.profile_fetcher is not fake_profile_fetcher


def test_create_strategy_reads_environment(monkeypatch):
    monkeypatch.setenv("TWITTER_AUTH_CONSUMER_KEY", "env-key")
    monkeypatch.setenv("TWITTER_AUTH_CONSUMER_SECRET", "env-secret")

    assert isinstance(create_strategy(), TwitterStrategy)


def test_create_strategy_with_explicit_settings():
    settings = TwitterAuthSettings(consumer_key="ck", consumer_secret="cs")
    assert isinstance(create_strategy(settings), TwitterStrategy)
