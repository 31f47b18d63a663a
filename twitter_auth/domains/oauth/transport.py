"""Signed HTTP round-trips to the provider.

One ``httpx.AsyncClient`` per request; connection-level failures become
``TransportError``. Status handling is left to the caller.
"""

import hashlib
from typing import Any, Dict, Optional

import httpx

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.core.logging import logger as default_logger
from twitter_auth.domains.oauth.error_classifier import classify_transport_error
from twitter_auth.domains.oauth.signer import OAuth1Signer, Params, as_pairs, stringify_param
from twitter_auth.domains.oauth.types import Credential


def token_fingerprint(token: Optional[str]) -> str:
    """Short, non-reversible token reference for log lines."""
    if not token:
        return "-"
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:12]


class SignedTransport:
    """Sends OAuth 1.0a signed requests."""

    def __init__(
        self,
        signer: OAuth1Signer,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Store the signer and HTTP options.

        Args:
            signer: Consumer-bound request signer
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
            logger: Logger for request tracing
        """
        self._signer = signer
        self._timeout = timeout
        self._transport = transport
        self._logger = logger or default_logger

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Params] = None,
        credential: Optional[Credential] = None,
        token: Optional[str] = None,
        token_secret: str = "",
        logger: Optional[ContextualLogger] = None,
    ) -> httpx.Response:
        """Sign and send a request.

        Non-``oauth_*`` params travel in the query string for GET and in a
        form body otherwise. ``credential`` takes precedence over the loose
        ``token``/``token_secret`` pair.

        Raises:
            TransportError: If the provider could not be reached
            InvalidArgumentError: If ``url`` is malformed
        """
        log = logger or self._logger
        method = method.upper()
        if credential is not None:
            token, token_secret = credential.key, credential.secret

        items = as_pairs(params)
        authorization = self._signer.sign(method, url, items, token, token_secret)
        request_params = [
            (k, stringify_param(v)) for k, v in items if not k.startswith("oauth_")
        ]

        headers = {"Authorization": authorization}
        kwargs: Dict[str, Any] = {"headers": headers}
        if method == "GET":
            kwargs["params"] = request_params
        else:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            kwargs["data"] = dict(request_params)

        log.debug(f"{method} {url} token={token_fingerprint(token)}")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            log.error(f"{method} {url} failed: {e.__class__.__name__}: {e}")
            raise classify_transport_error(e) from e

        log.debug(f"{method} {url} -> {response.status_code}")
        return response
