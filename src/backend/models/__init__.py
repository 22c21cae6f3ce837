"""Database models module."""

from models.candidate import Candidate
from models.vote import Vote
from models.voter import VoterProfile

__all__ = [
    "Candidate",
    "Vote",
    "VoterProfile",
]
