"""
Voter profile repository for database operations.
"""

from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.voter import VoterProfile


class VoterRepository:
    """Repository for voter profile database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _get_rowcount(self, result: Any) -> int:
        """Safely get rowcount from result."""
        return getattr(result, "rowcount", 0) or 0

    async def get_by_identity(self, identity: str) -> Optional[VoterProfile]:
        """Get the profile owned by an identity, always re-read from the database."""
        result = await self.db.execute(
            select(VoterProfile)
            .where(VoterProfile.identity == identity)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def voter_id_exists(self, voter_id: str) -> bool:
        """Check if a public voter id is already registered."""
        result = await self.db.execute(
            select(func.count(VoterProfile.id)).where(VoterProfile.voter_id == voter_id)
        )
        count = result.scalar() or 0
        return count > 0

    async def create(
        self,
        identity: str,
        voter_id: str,
        official_name: str,
        phone_number: str,
    ) -> VoterProfile:
        """
        Create a voter profile.

        Raises sqlalchemy.exc.IntegrityError on flush if the identity or the
        voter id is already taken.
        """
        profile = VoterProfile(
            id=str(uuid4()),
            identity=identity,
            voter_id=voter_id,
            official_name=official_name,
            phone_number=phone_number,
            is_admin=False,
        )

        self.db.add(profile)
        await self.db.flush()
        await self.db.refresh(profile)

        return profile

    async def set_admin_flag(self, identity: str, is_admin: bool) -> bool:
        """Grant or revoke the admin capability. Out-of-band use only."""
        result = await self.db.execute(
            update(VoterProfile).where(VoterProfile.identity == identity).values(is_admin=is_admin)
        )
        return self._get_rowcount(result) > 0
