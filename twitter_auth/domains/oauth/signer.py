"""OAuth 1.0a HMAC-SHA1 request signing.

Builds the signature base string and the ``Authorization`` header for a
request, as described in RFC 5849 section 3.

Reference: RFC 5849 - The OAuth 1.0 Protocol
"""

import base64
import hashlib
import hmac
import secrets
import time
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

from twitter_auth.core.exceptions import InvalidArgumentError

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

_DEFAULT_PORTS = {"http": 80, "https": 443}


class OAuth1Signer:
    """Signs requests on behalf of a single consumer."""

    signature_method = "HMAC-SHA1"
    version = "1.0"

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        *,
        nonce_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """Bind the consumer credentials.

        Args:
            consumer_key: Client identifier (API key)
            consumer_secret: Client secret
            nonce_factory: Override for nonce generation (tests)
            clock: Override for the Unix clock (tests)
        """
        self.consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._nonce_factory = nonce_factory or self._generate_nonce
        self._clock = clock or time.time

    def _generate_nonce(self) -> str:
        """Generate a cryptographically secure random nonce."""
        return secrets.token_urlsafe(32)

    def _get_timestamp(self) -> str:
        """Get current Unix timestamp as string."""
        return str(int(self._clock()))

    @staticmethod
    def _percent_encode(value: Any) -> str:
        """Percent-encode a value according to RFC 3986.

        Encodes all characters except unreserved: A-Z, a-z, 0-9, -, ., _, ~
        """
        return quote(stringify_param(value), safe="~")

    def _normalize_url(self, url: str) -> Tuple[str, List[Tuple[str, str]]]:
        """Split ``url`` into its base string URI and its query parameters."""
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise InvalidArgumentError("url", f"Malformed URL {url!r}: {e}") from e

        scheme = parts.scheme.lower()
        if scheme not in _DEFAULT_PORTS or not parts.hostname:
            raise InvalidArgumentError("url", f"Expected an absolute http(s) URL, got {url!r}")

        netloc = parts.hostname.lower()
        if port and port != _DEFAULT_PORTS[scheme]:
            netloc = f"{netloc}:{port}"

        base_url = urlunsplit((scheme, netloc, parts.path or "/", "", ""))
        query = parse_qsl(parts.query, keep_blank_values=True)
        return base_url, query

    def normalize_parameters(self, params: Iterable[Tuple[str, Any]]) -> str:
        """Encode, sort and concatenate parameters into the canonical string."""
        encoded = sorted(
            (self._percent_encode(k), self._percent_encode(v)) for k, v in params
        )
        return "&".join(f"{k}={v}" for k, v in encoded)

    def _build_signature_base_string(
        self, method: str, url: str, params: Iterable[Tuple[str, Any]]
    ) -> str:
        """Build the signature base string per RFC 5849.

        Format: HTTP_METHOD&URL&NORMALIZED_PARAMS
        """
        base_url, query = self._normalize_url(url)
        param_str = self.normalize_parameters([*query, *params])

        parts = [
            method.upper(),
            self._percent_encode(base_url),
            self._percent_encode(param_str),
        ]
        return "&".join(parts)

    def _sign_hmac_sha1(self, base_string: str, token_secret: str = "") -> str:
        """Sign the base string using HMAC-SHA1.

        Signing key: percent_encode(consumer_secret)&percent_encode(token_secret)
        """
        encoded_consumer = self._percent_encode(self._consumer_secret)
        encoded_token = self._percent_encode(token_secret or "")
        key = f"{encoded_consumer}&{encoded_token}"

        signature_bytes = hmac.new(
            key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
        ).digest()
        return base64.b64encode(signature_bytes).decode("utf-8")

    def _build_authorization_header(self, oauth_params: Mapping[str, str]) -> str:
        """Build OAuth1 Authorization header.

        Format: OAuth oauth_consumer_key="...", oauth_nonce="...", ...
        """
        param_strings = [
            f'{self._percent_encode(k)}="{self._percent_encode(v)}"'
            for k, v in sorted(oauth_params.items())
        ]
        return "OAuth " + ", ".join(param_strings)

    def oauth_parameters(self, token: Optional[str] = None) -> dict:
        """Fresh protocol parameters: new nonce and timestamp on every call."""
        oauth_params = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": self.signature_method,
            "oauth_timestamp": self._get_timestamp(),
            "oauth_version": self.version,
        }
        if token:
            oauth_params["oauth_token"] = token
        return oauth_params

    def signature(
        self,
        method: str,
        url: str,
        params: Iterable[Tuple[str, Any]],
        token_secret: str = "",
    ) -> str:
        """Compute ``oauth_signature`` for an already assembled parameter list."""
        base_string = self._build_signature_base_string(method, url, params)
        return self._sign_hmac_sha1(base_string, token_secret)

    def sign(
        self,
        method: str,
        url: str,
        params: Optional[Params] = None,
        token: Optional[str] = None,
        token_secret: str = "",
    ) -> str:
        """Return the ``Authorization`` header value for a request.

        ``oauth_*`` entries in ``params`` (``oauth_callback``,
        ``oauth_verifier``) are protocol parameters and go into the header;
        everything else is a request parameter that only contributes to the
        signature and must be sent in the query string or form body.

        Args:
            method: HTTP method
            url: Request URL; any query string is signed as well
            params: Request and extra protocol parameters
            token: Temporary or access token, if any
            token_secret: Secret matching ``token``

        Returns:
            Header value starting with ``OAuth ``

        Raises:
            InvalidArgumentError: If ``url`` is not an absolute http(s) URL
        """
        items = as_pairs(params)
        oauth_params = self.oauth_parameters(token)
        oauth_params.update(
            {k: stringify_param(v) for k, v in items if k.startswith("oauth_")}
        )
        request_params = [(k, v) for k, v in items if not k.startswith("oauth_")]

        oauth_params["oauth_signature"] = self.signature(
            method, url, [*oauth_params.items(), *request_params], token_secret
        )
        return self._build_authorization_header(oauth_params)


def stringify_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_pairs(params: Optional[Params]) -> List[Tuple[str, Any]]:
    if params is None:
        return []
    if isinstance(params, Mapping):
        return list(params.items())
    return list(params)
