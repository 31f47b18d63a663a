"""Maps provider responses and transport failures onto the AuthError taxonomy.

Pure functions, no I/O. Every input resolves to exactly one error type; any
status/body combination not handled explicitly becomes a generic
``ProviderError`` that keeps the raw status and body for diagnostics.
"""

import json
from typing import Any, Mapping, Optional

import httpx

from twitter_auth.core.exceptions import (
    AuthError,
    MalformedResponse,
    ProviderError,
    TransportError,
    Unauthorized,
)


def _parse_json(body: Optional[str]) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def _first_error(payload: Any) -> Optional[Mapping[str, Any]]:
    """Return ``payload["errors"][0]`` when it is a mapping, else None."""
    if not isinstance(payload, Mapping):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    return first if isinstance(first, Mapping) else None


def is_success(status_code: int) -> bool:
    """2xx and 3xx count as success, matching the provider's own semantics."""
    return 200 <= status_code < 400


def classify_transport_error(exc: httpx.RequestError) -> TransportError:
    """Wrap a connection-level failure."""
    if isinstance(exc, httpx.TimeoutException):
        return TransportError("Timed out waiting for OAuth provider")
    return TransportError(f"Failed to connect to OAuth provider: {exc.__class__.__name__}")


def classify_token_error(status_code: int, body: Optional[str]) -> ProviderError:
    """Classify a failed temporary-credential or access-token response.

    Bare string bodies become ``ProviderError(key=body, message="")``.
    Structured bodies contribute their ``code`` and ``reason``/``message``.
    """
    text = (body or "").strip()
    if not text:
        return ProviderError(
            f"HTTP {status_code}", key=str(status_code), status_code=status_code, body=body
        )

    payload = _parse_json(text)
    if not isinstance(payload, (Mapping, list)):
        bare = payload if isinstance(payload, str) else text
        return ProviderError("", key=bare, status_code=status_code, body=body)

    first = _first_error(payload)
    if first is not None:
        return ProviderError(
            str(first.get("message", "")),
            key=str(first.get("code", status_code)),
            status_code=status_code,
            body=body,
        )

    if isinstance(payload, Mapping) and "code" in payload:
        return ProviderError(
            str(payload.get("reason") or payload.get("message") or ""),
            key=str(payload["code"]),
            status_code=status_code,
            body=body,
        )

    if isinstance(payload, Mapping) and "error" in payload:
        return ProviderError(
            str(payload.get("error_description") or ""),
            key=str(payload["error"]),
            status_code=status_code,
            body=body,
        )

    return ProviderError(text, key=str(status_code), status_code=status_code, body=body)


def classify_profile_response(status_code: int, body: Optional[str]) -> Optional[AuthError]:
    """Classify a profile response; ``None`` means the status is a success.

    - 401 is always ``Unauthorized`` whatever the body says.
    - Other failures must carry an ``errors`` envelope; its first message is
      surfaced. Without one the response is malformed.
    """
    if status_code == 401:
        return Unauthorized("unauthorized", key="token")

    if is_success(status_code):
        return None

    first = _first_error(_parse_json(body))
    if first is None:
        return MalformedResponse(
            f"Provider error response without an errors envelope (HTTP {status_code})",
            key="token",
            status_code=status_code,
            body=body,
        )

    return ProviderError(
        str(first.get("message", "")), key="token", status_code=status_code, body=body
    )
