"""
Voter directory service.

Maps identities to voter profiles. One profile per identity, and public voter
ids are unique across all profiles. The unique constraints on the
voter_profiles table settle concurrent registrations; the lookups before the
insert only exist to give the common case a precise error.
"""

from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import AlreadyRegistered, DuplicateVoterId, InvalidInput
from core.logging_config import identity_fingerprint
from db.transaction import transaction
from models.voter import VoterProfile
from repositories.voter_repository import VoterRepository

logger = structlog.get_logger(__name__)


def _required(value: Optional[str], field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidInput(f"{field} is required")
    return cleaned


class VoterDirectory:
    """Registration and lookup of voter profiles."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.voters = VoterRepository(db)

    async def register_profile(
        self,
        identity: str,
        public_voter_id: str,
        official_name: str,
        phone_number: str,
    ) -> VoterProfile:
        """
        Create the voter profile owned by ``identity``.

        Raises:
            AlreadyRegistered: the identity already owns a profile
            DuplicateVoterId: the public voter id belongs to another identity
            InvalidInput: a required field is blank
        """
        public_voter_id = _required(public_voter_id, "Voter ID")
        official_name = _required(official_name, "Official name")
        phone_number = _required(phone_number, "Phone number")

        try:
            async with transaction(self.db):
                if await self.voters.get_by_identity(identity) is not None:
                    raise AlreadyRegistered()
                if await self.voters.voter_id_exists(public_voter_id):
                    raise DuplicateVoterId()
                profile = await self.voters.create(
                    identity=identity,
                    voter_id=public_voter_id,
                    official_name=official_name,
                    phone_number=phone_number,
                )
        except IntegrityError:
            # Lost a race with a concurrent registration; find out which one
            raise await self._classify_conflict(identity)

        logger.info("voter_profile_registered", identity=identity_fingerprint(identity))
        return profile

    async def _classify_conflict(self, identity: str) -> Exception:
        existing = await self.voters.get_by_identity(identity)
        if existing is not None:
            return AlreadyRegistered()
        logger.warning("duplicate_voter_id_rejected", identity=identity_fingerprint(identity))
        return DuplicateVoterId()

    async def get_profile(self, identity: Optional[str]) -> Optional[VoterProfile]:
        """Get the profile owned by ``identity``, or None."""
        if identity is None:
            return None
        return await self.voters.get_by_identity(identity)

    async def is_admin_flag(self, identity: Optional[str]) -> bool:
        """True only if ``identity`` has a profile with the admin flag set."""
        profile = await self.get_profile(identity)
        return bool(profile is not None and profile.is_admin)
