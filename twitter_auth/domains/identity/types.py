"""Provider-agnostic identity record produced by a successful handshake."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

Profile = Dict[str, Any]


class Credentials(BaseModel):
    """Access credentials handed to the host."""

    model_config = ConfigDict(frozen=True)

    token: str
    secret: str = Field(repr=False)


class Info(BaseModel):
    """Normalized user profile fields."""

    model_config = ConfigDict(frozen=True)

    email: Optional[str] = None
    image: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    urls: Dict[str, Optional[str]] = Field(default_factory=dict)


class Extra(BaseModel):
    """Raw provider data kept for host-specific lookups."""

    model_config = ConfigDict(frozen=True)

    raw_info: Dict[str, Any] = Field(default_factory=dict)


class Identity(BaseModel):
    """Result of a completed handshake."""

    model_config = ConfigDict(frozen=True)

    provider: str = "twitter"
    strategy: str = "twitter_auth.TwitterStrategy"
    uid: str = ""
    credentials: Credentials
    info: Info = Field(default_factory=Info)
    extra: Extra = Field(default_factory=Extra)
