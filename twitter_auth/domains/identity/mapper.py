"""Maps a raw provider profile onto the identity record."""

from typing import Any, Mapping, Optional

from twitter_auth.domains.identity.types import Credentials, Extra, Identity, Info
from twitter_auth.domains.oauth.types import Credential

PROFILE_URL_BASE = "https://twitter.com/"


def _text(profile: Mapping[str, Any], field: str) -> Optional[str]:
    value = profile.get(field)
    return None if value is None else str(value)


class IdentityMapper:
    """Builds ``Identity`` records from ``verify_credentials`` payloads."""

    def __init__(self, uid_field: str = "id_str") -> None:
        self.uid_field = uid_field

    def uid(self, profile: Mapping[str, Any]) -> str:
        """Return the uid field as a string; a missing or null field yields ``""``."""
        return _text(profile, self.uid_field) or ""

    def info(self, profile: Mapping[str, Any]) -> Info:
        screen_name = _text(profile, "screen_name")
        return Info(
            email=_text(profile, "email"),
            image=_text(profile, "profile_image_url_https"),
            name=_text(profile, "name"),
            nickname=screen_name,
            description=_text(profile, "description"),
            location=_text(profile, "location"),
            urls={
                "Twitter": f"{PROFILE_URL_BASE}{screen_name or ''}",
                "Website": _text(profile, "url"),
            },
        )

    def to_identity(self, profile: Mapping[str, Any], credential: Credential) -> Identity:
        """Assemble the identity for a fetched profile and its access credential.

        The profile is stored unmodified under ``extra.raw_info["user"]``
        alongside the access token (not its secret).
        """
        return Identity(
            uid=self.uid(profile),
            credentials=Credentials(token=credential.key, secret=credential.secret),
            info=self.info(profile),
            extra=Extra(raw_info={"token": credential.key, "user": dict(profile)}),
        )
