"""
Tally engine.

Public, read-only aggregation of votes per candidate.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.candidate_repository import CandidateRepository


@dataclass(frozen=True)
class CandidateTally:
    candidate_id: int
    name: str
    description: Optional[str]
    image_url: Optional[str]
    vote_count: int


class TallyEngine:
    """Per-candidate vote counts with display metadata."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.candidates = CandidateRepository(db)

    async def get_tally(self) -> list[CandidateTally]:
        """
        Count votes for every existing candidate, in creation order.

        Candidates without votes are reported with a count of 0. Deleted
        candidates cannot appear: their votes are removed with them.
        """
        rows = await self.candidates.get_vote_counts()
        return [
            CandidateTally(
                candidate_id=candidate.id,
                name=candidate.name,
                description=candidate.description,
                image_url=candidate.image_url,
                vote_count=count,
            )
            for candidate, count in rows
        ]
