"""Per-handshake context.

Owned by the caller and threaded through ``begin_auth``, ``complete_auth``
and ``cleanup``. The strategy keeps no state of its own between calls.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from twitter_auth.core.logging import ContextualLogger
from twitter_auth.domains.identity.types import Identity, Profile
from twitter_auth.domains.oauth.types import Credential


@dataclass
class AuthContext:
    """Transient data for one authentication attempt.

    ``logger`` is keyword-only; when omitted it is derived from the package
    logger with a ``handshake_id`` dimension.
    """

    handshake_id: str = field(default_factory=lambda: uuid4().hex)

    temporary_credential: Optional[Credential] = None
    authorize_url: Optional[str] = None
    access_credential: Optional[Credential] = field(default=None, repr=False)
    profile: Optional[Profile] = field(default=None, repr=False)
    identity: Optional[Identity] = field(default=None, repr=False)

    logger: ContextualLogger = field(default=None, kw_only=True, repr=False)

    def __post_init__(self):
        """Auto-derive logger from the handshake id if not provided."""
        if self.logger is None:
            from twitter_auth.core.logging import logger as base_logger

            self.logger = base_logger.with_context(handshake_id=self.handshake_id)

    def clear(self) -> None:
        """Discard everything collected during the attempt."""
        self.temporary_credential = None
        self.authorize_url = None
        self.access_credential = None
        self.profile = None
        self.identity = None
