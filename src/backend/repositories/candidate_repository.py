"""
Candidate repository for database operations.
"""

from typing import Any, Optional

from sqlalchemy import delete, func, outerjoin, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.candidate import Candidate
from models.vote import Vote


class CandidateRepository:
    """Repository for candidate database operations."""

    # Columns callers may change through update_fields
    UPDATABLE_FIELDS = frozenset({"name", "description", "image_url", "description_doc_id"})

    def __init__(self, db: AsyncSession):
        self.db = db

    def _get_rowcount(self, result: Any) -> int:
        """Safely get rowcount from result."""
        return getattr(result, "rowcount", 0) or 0

    async def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        """Get a candidate by ID."""
        result = await self.db.execute(select(Candidate).where(Candidate.id == candidate_id))
        return result.scalar_one_or_none()

    async def exists(self, candidate_id: int) -> bool:
        """Check if a candidate exists."""
        result = await self.db.execute(select(func.count(Candidate.id)).where(Candidate.id == candidate_id))
        count = result.scalar() or 0
        return count > 0

    async def list_all(self) -> list[Candidate]:
        """List all candidates in creation order."""
        result = await self.db.execute(select(Candidate).order_by(Candidate.id.asc()))
        return list(result.scalars().all())

    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        description_doc_id: Optional[str] = None,
    ) -> Candidate:
        """Create a new candidate."""
        candidate = Candidate(
            name=name,
            description=description,
            image_url=image_url,
            description_doc_id=description_doc_id,
        )

        self.db.add(candidate)
        await self.db.flush()
        await self.db.refresh(candidate)

        return candidate

    async def update_fields(self, candidate_id: int, fields: dict[str, Any]) -> bool:
        """
        Update only the given columns of a candidate.

        Keys not present in ``fields`` are left untouched; a key mapped to None
        clears that column.
        """
        if not fields:
            return await self.exists(candidate_id)

        result = await self.db.execute(
            update(Candidate)
            .where(Candidate.id == candidate_id)
            .values(**fields, updated_at=func.now())
        )
        return self._get_rowcount(result) > 0

    async def delete_with_votes(self, candidate_id: int) -> int:
        """
        Delete every vote for a candidate, then the candidate itself.

        Both statements run in the caller's transaction; the caller commits or
        rolls back. Returns the number of votes removed.
        """
        votes_result = await self.db.execute(delete(Vote).where(Vote.candidate_id == candidate_id))
        await self.db.execute(delete(Candidate).where(Candidate.id == candidate_id))
        return self._get_rowcount(votes_result)

    async def get_vote_counts(self) -> list[tuple[Candidate, int]]:
        """
        Get every candidate with its vote count, in creation order.

        A single aggregate statement, so all counts come from one snapshot.
        """
        result = await self.db.execute(
            select(Candidate, func.count(Vote.id).label("vote_count"))
            .select_from(outerjoin(Candidate, Vote, Vote.candidate_id == Candidate.id))
            .group_by(Candidate.id)
            .order_by(Candidate.id.asc())
        )
        return [(row[0], int(row[1] or 0)) for row in result.all()]
