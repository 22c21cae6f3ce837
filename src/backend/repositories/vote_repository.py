"""
Vote repository for database operations.

Vote uniqueness per voter is enforced by the uq_votes_voter_identity
constraint; this repository never checks-then-inserts.
"""

from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.vote import Vote


class VoteRepository:
    """Repository for vote database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_for_voter(self, voter_identity: str) -> bool:
        """Check if an identity has a recorded vote."""
        result = await self.db.execute(
            select(func.count(Vote.id)).where(Vote.voter_identity == voter_identity)
        )
        count = result.scalar() or 0
        return count > 0

    async def create(self, voter_identity: str, candidate_id: int) -> Vote:
        """
        Insert a vote.

        Raises sqlalchemy.exc.IntegrityError on flush when the voter already
        has a vote or the candidate no longer exists.
        """
        vote = Vote(
            id=str(uuid4()),
            voter_identity=voter_identity,
            candidate_id=candidate_id,
        )

        self.db.add(vote)
        await self.db.flush()

        return vote
