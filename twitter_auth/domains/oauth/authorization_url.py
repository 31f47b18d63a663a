"""Authorization URL for user consent (step 2 of the OAuth1 flow)."""

from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from twitter_auth.core.exceptions import ConfigurationError
from twitter_auth.domains.oauth.types import Credential


class AuthorizationURLBuilder:
    """Builds the browser redirect to the provider's authorize endpoint."""

    def __init__(self, authorize_url: str) -> None:
        """Validate and store the authorize endpoint.

        Raises:
            ConfigurationError: If ``authorize_url`` is not an absolute http(s) URL
        """
        parts = urlsplit(authorize_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"authorize URL must be an absolute http(s) URL, got {authorize_url!r}"
            )
        self._parts = parts

    @property
    def authorize_url(self) -> str:
        """The configured endpoint."""
        return urlunsplit(self._parts)

    def build_url(
        self,
        temporary_credential: Credential,
        *,
        force_login: bool = False,
        screen_name: Optional[str] = None,
    ) -> str:
        """Build the authorization URL for a temporary credential.

        Only the token travels in the URL, never its secret.

        Args:
            temporary_credential: Credential from the request-token step
            force_login: Ask the provider to prompt for credentials again
            screen_name: Prefill the login form with this screen name

        Returns:
            Complete authorization URL for user redirect
        """
        params = parse_qsl(self._parts.query, keep_blank_values=True)
        params.append(("oauth_token", temporary_credential.key))

        if force_login:
            params.append(("force_login", "true"))
        if screen_name:
            params.append(("screen_name", screen_name))

        scheme, netloc, path, _, fragment = self._parts
        return urlunsplit((scheme, netloc, path, urlencode(params), fragment))
