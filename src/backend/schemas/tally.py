"""
Tally Pydantic schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CandidateTally(BaseModel):
    """Vote count for one candidate, with display metadata."""

    candidate_id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    vote_count: int = 0

    model_config = {"from_attributes": True}


class TallyResponse(BaseModel):
    """Election results across all current candidates."""

    candidates: list[CandidateTally]
    total_votes: int = Field(0, description="Sum of all candidate vote counts")
