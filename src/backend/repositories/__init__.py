"""Repository modules for database access."""

from repositories.candidate_repository import CandidateRepository
from repositories.vote_repository import VoteRepository
from repositories.voter_repository import VoterRepository

__all__ = [
    "CandidateRepository",
    "VoteRepository",
    "VoterRepository",
]
