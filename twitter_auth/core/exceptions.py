"""Shared exceptions module."""

from typing import Optional


class TwitterAuthException(Exception):
    """Base exception for twitter_auth."""

    pass


class ConfigurationError(TwitterAuthException):
    """Exception raised when the strategy is configured with unusable values."""

    def __init__(self, message: Optional[str] = "Invalid configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(TwitterAuthException):
    """Exception raised when a caller hands over a malformed value (e.g. a URL)."""

    def __init__(self, argument: str, message: Optional[str] = "Invalid argument"):
        """Create a new InvalidArgumentError instance.

        Args:
        ----
            argument (str): Name of the offending argument.
            message (str, optional): The error message. Has default message.

        """
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")


class AuthError(TwitterAuthException):
    """Base for errors scoped to a single authentication handshake.

    ``key`` and ``message`` mirror the error shape hosts present to users
    (``{"message_key": ..., "message": ...}``).
    """

    default_key = "auth_error"

    def __init__(self, message: str = "", *, key: Optional[str] = None):
        """Create a new AuthError instance.

        Args:
        ----
            message (str): Human readable error message.
            key (str, optional): Machine readable error key. Defaults to the
                class level ``default_key``.

        """
        self.key = key or self.default_key
        self.message = message
        super().__init__(f"{self.key}: {message}" if message else self.key)

    def to_dict(self) -> dict:
        """Return the host-facing error shape."""
        return {"message_key": self.key, "message": self.message}


class TransportError(AuthError):
    """Raised when the provider could not be reached."""

    default_key = "transport_error"


class ProtocolViolation(AuthError):
    """Raised when a provider response breaks the OAuth 1.0a contract."""

    default_key = "protocol_violation"


class MalformedResponse(ProtocolViolation):
    """Raised when a provider response body cannot be interpreted."""

    default_key = "malformed_response"

    def __init__(
        self,
        message: str = "",
        *,
        key: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        """Create a new MalformedResponse instance.

        Args:
        ----
            message (str): Human readable error message.
            key (str, optional): Machine readable error key.
            status_code (int, optional): HTTP status of the offending response.
            body (str, optional): Raw body of the offending response.

        """
        self.status_code = status_code
        self.body = body
        super().__init__(message, key=key)


class Unauthorized(AuthError):
    """Raised when the provider rejects the access credential."""

    default_key = "token"

    def __init__(self, message: str = "unauthorized", *, key: Optional[str] = None):
        """Create a new Unauthorized instance."""
        super().__init__(message, key=key)


class ProviderError(AuthError):
    """Raised when the provider answers with an error body.

    For token endpoints ``key`` is the provider error code and ``message`` the
    reason; for the profile endpoint ``key`` is the rejected field.
    """

    default_key = "provider_error"

    def __init__(
        self,
        message: str = "",
        *,
        key: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        """Create a new ProviderError instance.

        Args:
        ----
            message (str): Provider supplied reason or message.
            key (str, optional): Provider error code or rejected field.
            status_code (int, optional): HTTP status of the response.
            body (str, optional): Raw response body, kept for diagnostics.

        """
        self.status_code = status_code
        self.body = body
        super().__init__(message, key=key)

    @property
    def code(self) -> str:
        """Provider error code (alias of ``key``)."""
        return self.key

    @property
    def reason(self) -> str:
        """Provider error reason (alias of ``message``)."""
        return self.message


class MissingCallbackCode(AuthError):
    """Raised when a callback carries neither a verifier nor a token pair."""

    default_key = "missing_code"

    def __init__(self, message: str = "No code received", *, key: Optional[str] = None):
        """Create a new MissingCallbackCode instance."""
        super().__init__(message, key=key)
