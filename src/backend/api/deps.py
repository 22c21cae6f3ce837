"""
Shared dependencies for API endpoints.

Includes:
- Identity resolution from the identity provider's bearer token
- Construction of the per-request election services
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import identity_from_token
from db.session import get_db
from services.auth_gate import AuthGate
from services.ballot_box import BallotBox
from services.candidate_registry import CandidateRegistry
from services.tally_engine import TallyEngine
from services.voter_directory import VoterDirectory

# Missing credentials are not an error here; AuthGate decides per operation
security_optional = HTTPBearer(auto_error=False)


# =============================================================================
# Identity
# =============================================================================


async def get_current_identity(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security_optional)],
) -> Optional[str]:
    """
    Resolve the caller's identity from the bearer token.

    Returns None if no token is provided or the token is invalid or expired.
    """
    if credentials is None:
        return None
    return identity_from_token(credentials.credentials)


# =============================================================================
# Services
# =============================================================================


async def get_voter_directory(db: AsyncSession = Depends(get_db)) -> VoterDirectory:
    return VoterDirectory(db)


async def get_auth_gate(
    identity: Annotated[Optional[str], Depends(get_current_identity)],
    directory: Annotated[VoterDirectory, Depends(get_voter_directory)],
) -> AuthGate:
    """AuthGate bound to this request's identity and session."""
    return AuthGate(identity, directory)


async def get_candidate_registry(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
    db: AsyncSession = Depends(get_db),
) -> CandidateRegistry:
    return CandidateRegistry(db, gate)


async def get_ballot_box(db: AsyncSession = Depends(get_db)) -> BallotBox:
    return BallotBox(db)


async def get_tally_engine(db: AsyncSession = Depends(get_db)) -> TallyEngine:
    return TallyEngine(db)
