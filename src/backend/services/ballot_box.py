"""
Ballot box service.

Records at most one vote per voter identity. The duplicate check is the
INSERT itself: the unique constraint on votes.voter_identity rejects a second
vote no matter how concurrent requests interleave. There is no separate
"has this voter voted?" read before the write.
"""

from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import AlreadyVoted, NotFound, ProfileRequired, Unauthenticated
from core.logging_config import identity_fingerprint
from db.transaction import transaction
from models.vote import Vote
from repositories.candidate_repository import CandidateRepository
from repositories.vote_repository import VoteRepository
from repositories.voter_repository import VoterRepository

logger = structlog.get_logger(__name__)


class BallotBox:
    """Vote casting and vote-status lookup."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.votes = VoteRepository(db)
        self.voters = VoterRepository(db)
        self.candidates = CandidateRepository(db)

    async def cast_vote(self, identity: Optional[str], candidate_id: int) -> Vote:
        """
        Cast ``identity``'s single vote for ``candidate_id``.

        Raises:
            Unauthenticated: no identity
            ProfileRequired: the identity has no voter profile
            NotFound: the candidate does not exist
            AlreadyVoted: the identity already has a vote
        """
        if identity is None:
            raise Unauthenticated("You must be signed in to vote")

        try:
            async with transaction(self.db):
                if await self.voters.get_by_identity(identity) is None:
                    raise ProfileRequired()
                if not await self.candidates.exists(candidate_id):
                    raise NotFound("Candidate not found", context={"candidate_id": candidate_id})
                vote = await self.votes.create(voter_identity=identity, candidate_id=candidate_id)
        except IntegrityError:
            # Either the voter already has a vote or the candidate was deleted
            # between our check and the insert
            if await self.votes.exists_for_voter(identity):
                logger.warning("duplicate_vote_rejected", identity=identity_fingerprint(identity))
                raise AlreadyVoted()
            raise NotFound("Candidate not found", context={"candidate_id": candidate_id})

        logger.info("vote_cast", candidate_id=candidate_id, identity=identity_fingerprint(identity))
        return vote

    async def has_voted(self, identity: Optional[str]) -> bool:
        """True if ``identity`` has a vote; False for anonymous callers."""
        if identity is None:
            return False
        return await self.votes.exists_for_voter(identity)
