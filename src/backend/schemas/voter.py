"""
Voter profile Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class VoterProfileCreate(BaseModel):
    """Schema for registering the caller's voter profile."""

    voter_id: str = Field(..., min_length=1, max_length=100, description="Unique public voter ID")
    official_name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., min_length=1, max_length=50)


class VoterProfile(BaseModel):
    """The caller's own voter profile."""

    voter_id: str
    official_name: str
    phone_number: str
    is_admin: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RegistrationResponse(BaseModel):
    success: bool = True
    message: str = "Voter profile created successfully"


class AdminStatus(BaseModel):
    """Whether the caller holds the admin capability."""

    is_admin: bool
