"""
Vote endpoints.

Each voter identity can cast exactly one vote, for one existing candidate.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from api.deps import get_ballot_box, get_current_identity
from schemas.vote import VoteCreate, VoteResponse, VoteStatus
from services.ballot_box import BallotBox

router = APIRouter()


@router.post("", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
async def cast_vote(
    vote_data: VoteCreate,
    identity: Annotated[Optional[str], Depends(get_current_identity)],
    ballot_box: Annotated[BallotBox, Depends(get_ballot_box)],
) -> VoteResponse:
    """
    Cast the caller's vote.

    Requirements:
    - Caller must be signed in
    - Caller must have registered a voter profile
    - Candidate must exist
    - Caller must not have voted before
    """
    await ballot_box.cast_vote(identity, vote_data.candidate_id)
    return VoteResponse(success=True, message="Vote cast successfully!")


@router.get("/status", response_model=VoteStatus)
async def check_vote_status(
    identity: Annotated[Optional[str], Depends(get_current_identity)],
    ballot_box: Annotated[BallotBox, Depends(get_ballot_box)],
) -> VoteStatus:
    """Whether the caller has voted. Anonymous callers get false."""
    return VoteStatus(has_voted=await ballot_box.has_voted(identity))
