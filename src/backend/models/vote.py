"""
Vote model.

SINGLE-CHOICE DESIGN:
- voter_identity carries a unique constraint; a second insert for the same
  voter fails in the database, whatever the interleaving of requests
- candidate_id is a foreign key with ON DELETE CASCADE, so a vote can never
  outlive its candidate
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class Vote(Base):
    """One voter's immutable choice of one candidate."""

    __tablename__ = "votes"

    __table_args__ = (
        UniqueConstraint("voter_identity", name="uq_votes_voter_identity"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    voter_identity: Mapped[str] = mapped_column(String(255))

    candidate_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
