"""
Candidate-related Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CandidateBase(BaseModel):
    """Display fields shared by requests and responses."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, description="Plain-text description")
    image_url: Optional[str] = Field(None, max_length=2048)


class CandidateCreate(CandidateBase):
    """Schema for adding a candidate."""

    description_doc_id: Optional[str] = Field(
        None,
        max_length=255,
        description="Reference key of a rich-text description in the document store",
    )


class CandidateUpdate(BaseModel):
    """
    Partial update for a candidate.

    Omitted fields are left unchanged. Sending a field as null clears it
    (name cannot be cleared). Read the request with
    ``model_dump(exclude_unset=True)`` to keep that distinction.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=2048)
    description_doc_id: Optional[str] = Field(None, max_length=255)

    model_config = {"extra": "forbid"}


class Candidate(CandidateBase):
    """Schema for candidate responses."""

    id: int
    description_doc_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CandidateMutationResponse(BaseModel):
    """Success marker returned by candidate writes."""

    success: bool = True
    message: str
    candidate_id: int
