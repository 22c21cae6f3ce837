"""
Schema converter functions.

Centralized helpers for converting models and service results to Pydantic
schemas, so every endpoint renders them the same way.
"""

from typing import TYPE_CHECKING

from schemas.candidate import Candidate
from schemas.tally import CandidateTally, TallyResponse
from schemas.voter import VoterProfile

if TYPE_CHECKING:
    from models.candidate import Candidate as CandidateModel
    from models.voter import VoterProfile as VoterProfileModel
    from services.tally_engine import CandidateTally as CandidateTallyResult


def candidate_model_to_schema(candidate: "CandidateModel") -> Candidate:
    """Convert a Candidate model to its response schema."""
    return Candidate(
        id=candidate.id,
        name=candidate.name,
        description=candidate.description,
        image_url=candidate.image_url,
        description_doc_id=candidate.description_doc_id,
        created_at=candidate.created_at,
        updated_at=candidate.updated_at,
    )


def voter_profile_model_to_schema(profile: "VoterProfileModel") -> VoterProfile:
    """
    Convert a VoterProfile model to its response schema.

    The identity is deliberately not part of the response.
    """
    return VoterProfile(
        voter_id=profile.voter_id,
        official_name=profile.official_name,
        phone_number=profile.phone_number,
        is_admin=profile.is_admin,
        created_at=profile.created_at,
    )


def tally_to_schema(rows: "list[CandidateTallyResult]") -> TallyResponse:
    """Convert tally engine output to the public results schema."""
    candidates = [CandidateTally.model_validate(row) for row in rows]
    return TallyResponse(
        candidates=candidates,
        total_votes=sum(c.vote_count for c in candidates),
    )
