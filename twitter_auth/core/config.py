"""Strategy configuration.

Uses Pydantic Settings for automatic env var loading:
    TWITTER_AUTH_CONSUMER_KEY=...
    TWITTER_AUTH_CONSUMER_SECRET=...
    TWITTER_AUTH_UID_FIELD=screen_name
"""

from typing import Literal
from urllib.parse import urlsplit

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TwitterAuthSettings(BaseSettings):
    """Consumer credentials, provider endpoints and ambient options."""

    model_config = SettingsConfigDict(
        env_prefix="TWITTER_AUTH_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    consumer_key: str = Field("", description="OAuth consumer key (API key)")
    consumer_secret: SecretStr = Field(
        SecretStr(""), description="OAuth consumer secret (API secret)"
    )
    uid_field: str = Field("id_str", description="Profile field used as the identity uid")

    api_url: str = Field("https://api.twitter.com", description="Provider base URL")
    request_token_path: str = "/oauth/request_token"
    authorize_path: str = "/oauth/authorize"
    access_token_path: str = "/oauth/access_token"
    profile_path: str = "/1.1/account/verify_credentials.json"

    http_timeout: float = Field(10.0, gt=0, description="Per-request timeout in seconds")

    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so paths can be appended verbatim."""
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_api_url(self):
        """The base URL must be an absolute http(s) URL."""
        parts = urlsplit(self.api_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"api_url must be an absolute http(s) URL, got {self.api_url!r}")
        return self

    def _endpoint(self, path: str) -> str:
        if urlsplit(path).scheme:
            return path
        return f"{self.api_url}/{path.lstrip('/')}"

    @property
    def request_token_url(self) -> str:
        """Temporary credential endpoint."""
        return self._endpoint(self.request_token_path)

    @property
    def authorize_url(self) -> str:
        """Browser authorization endpoint."""
        return self._endpoint(self.authorize_path)

    @property
    def access_token_url(self) -> str:
        """Access token endpoint."""
        return self._endpoint(self.access_token_path)

    @property
    def profile_url(self) -> str:
        """Authenticated user profile endpoint."""
        return self._endpoint(self.profile_path)

    def with_overrides(self, **overrides) -> "TwitterAuthSettings":
        """Return a new settings object with ``overrides`` applied."""
        if not overrides:
            return self
        current = self.model_dump()
        current["consumer_secret"] = self.consumer_secret.get_secret_value()
        current.update(overrides)
        return TwitterAuthSettings(**current)
