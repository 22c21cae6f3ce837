"""
Authentication gate.

Resolves the caller's identity for the current request and checks the admin
capability. The admin flag is read from the voter profile on every call and
never cached.
"""

from typing import Optional

import structlog

from core.exceptions import Forbidden, Unauthenticated
from core.logging_config import identity_fingerprint
from services.voter_directory import VoterDirectory

logger = structlog.get_logger(__name__)


class AuthGate:
    """Identity and admin-capability checks for one request."""

    def __init__(self, identity: Optional[str], directory: VoterDirectory):
        self._identity = identity
        self.directory = directory

    def current_identity(self) -> Optional[str]:
        """The caller's identity, or None when no one is signed in."""
        return self._identity

    def require_identity(self) -> str:
        """Return the caller's identity or raise Unauthenticated."""
        if self._identity is None:
            raise Unauthenticated()
        return self._identity

    async def require_admin(self) -> str:
        """
        Return the caller's identity if they hold the admin capability.

        Raises:
            Unauthenticated: no identity on the request
            Forbidden: no voter profile, or the profile is not an admin
        """
        identity = self.require_identity()
        if not await self.directory.is_admin_flag(identity):
            logger.warning("non_admin_access_attempt", identity=identity_fingerprint(identity))
            raise Forbidden()
        return identity
