"""
Vote-related Pydantic schemas.
"""

from pydantic import BaseModel


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    candidate_id: int


class VoteResponse(BaseModel):
    """Response after successfully casting a vote."""

    success: bool
    message: str


class VoteStatus(BaseModel):
    """Whether the caller has voted (without revealing the choice)."""

    has_voted: bool
