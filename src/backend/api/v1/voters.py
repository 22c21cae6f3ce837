"""
Voter profile endpoints.

A signed-in user registers one voter profile; the profile is what makes
them eligible to vote.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from api.deps import get_auth_gate
from schemas.converters import voter_profile_model_to_schema
from schemas.voter import AdminStatus, RegistrationResponse, VoterProfile, VoterProfileCreate
from services.auth_gate import AuthGate

router = APIRouter()


@router.post("/profile", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_profile(
    profile_data: VoterProfileCreate,
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> RegistrationResponse:
    """Create the caller's voter profile. A profile can only be created once."""
    identity = gate.require_identity()
    await gate.directory.register_profile(
        identity=identity,
        public_voter_id=profile_data.voter_id,
        official_name=profile_data.official_name,
        phone_number=profile_data.phone_number,
    )
    return RegistrationResponse()


@router.get("/me", response_model=Optional[VoterProfile])
async def get_current_voter_profile(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> Optional[VoterProfile]:
    """The caller's voter profile, or null if anonymous or not registered."""
    profile = await gate.directory.get_profile(gate.current_identity())
    if profile is None:
        return None
    return voter_profile_model_to_schema(profile)


@router.get("/me/is-admin", response_model=AdminStatus)
async def is_admin(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> AdminStatus:
    return AdminStatus(is_admin=await gate.directory.is_admin_flag(gate.current_identity()))
