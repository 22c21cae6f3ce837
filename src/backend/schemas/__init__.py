"""Schemas module initialization."""

from schemas.candidate import Candidate, CandidateCreate, CandidateUpdate
from schemas.tally import CandidateTally, TallyResponse
from schemas.vote import VoteCreate, VoteResponse, VoteStatus
from schemas.voter import AdminStatus, VoterProfile, VoterProfileCreate

__all__ = [
    "Candidate",
    "CandidateCreate",
    "CandidateUpdate",
    "CandidateTally",
    "TallyResponse",
    "VoteCreate",
    "VoteResponse",
    "VoteStatus",
    "AdminStatus",
    "VoterProfile",
    "VoterProfileCreate",
]
