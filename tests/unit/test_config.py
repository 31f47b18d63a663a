"""Unit tests for TwitterAuthSettings."""

import pytest
from pydantic import ValidationError

from twitter_auth.core.config import TwitterAuthSettings


def test_defaults_point_at_twitter(monkeypatch):
    monkeypatch.delenv("TWITTER_AUTH_API_URL", raising=False)
    settings = TwitterAuthSettings(consumer_key="ck", consumer_secret="cs")

    assert settings.uid_field == "id_str"
    assert settings.request_token_url == "https://api.twitter.com/oauth/request_token"
    assert settings.authorize_url == "https://api.twitter.com/oauth/authorize"
    assert settings.access_token_url == "https://api.twitter.com/oauth/access_token"
    assert settings.profile_url == (
        "https://api.twitter.com/1.1/account/verify_credentials.json"
    )


def test_env_vars_are_loaded(monkeypatch):
    monkeypatch.setenv("TWITTER_AUTH_CONSUMER_KEY", "env-key")
    monkeypatch.setenv("TWITTER_AUTH_CONSUMER_SECRET", "env-secret")
    monkeypatch.setenv("TWITTER_AUTH_UID_FIELD", "screen_name")
    monkeypatch.setenv("TWITTER_AUTH_HTTP_TIMEOUT", "2.5")

    settings = TwitterAuthSettings()

    assert settings.consumer_key == "env-key"
    assert settings.consumer_secret.get_secret_value() == "env-secret"
    assert settings.uid_field == "screen_name"
    assert settings.http_timeout == 2.5


def test_consumer_secret_is_masked():
    settings = TwitterAuthSettings(consumer_key="ck", consumer_secret="super-secret")
    assert "super-secret" not in repr(settings)
    assert "super-secret" not in str(settings.model_dump())


def test_trailing_slash_stripped():
    settings = TwitterAuthSettings(api_url="https://provider.test/")
    assert settings.access_token_url == "https://provider.test/oauth/access_token"


def test_absolute_paths_override_base_url():
    settings = TwitterAuthSettings(
        api_url="https://api.provider.test",
        authorize_path="https://provider.test/oauth/authenticate",
    )
    assert settings.authorize_url == "https://provider.test/oauth/authenticate"
    assert settings.request_token_url == "https://api.provider.test/oauth/request_token"


@pytest.mark.parametrize("api_url", ["api.twitter.com", "ftp://api.twitter.com", "https://"])
def test_invalid_api_url_rejected(api_url: str):
    with pytest.raises(ValidationError):
        TwitterAuthSettings(api_url=api_url)


@pytest.mark.parametrize("timeout", [0, -1])
def test_non_positive_timeout_rejected(timeout: float):
    with pytest.raises(ValidationError):
        TwitterAuthSettings(http_timeout=timeout)


def test_with_overrides_returns_new_settings(settings):
    updated = settings.with_overrides(uid_field="screen_name")

    assert updated is not settings
    assert updated.uid_field == "screen_name"
    assert updated.consumer_secret.get_secret_value() == "cs"
    assert settings.uid_field == "id_str"
    assert settings.with_overrides() is settings
