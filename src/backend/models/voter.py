"""
Voter profile model.

Binds an external identity to a public voter record. Both the identity and
the public voter id are unique at the storage layer, so concurrent
registrations cannot produce duplicates.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String, UniqueConstraint, Uuid, false, func
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class VoterProfile(Base):
    """
    A registered voter.

    is_admin is never set through registration; promotion happens out of band
    (see scripts/promote_admin.py).
    """

    __tablename__ = "voter_profiles"

    __table_args__ = (
        UniqueConstraint("identity", name="uq_voter_profiles_identity"),
        UniqueConstraint("voter_id", name="uq_voter_profiles_voter_id"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    # Opaque identity from the external identity provider
    identity: Mapped[str] = mapped_column(String(255), index=True)

    # Public voter id chosen at registration
    voter_id: Mapped[str] = mapped_column(String(100), index=True)
    official_name: Mapped[str] = mapped_column(String(255))
    phone_number: Mapped[str] = mapped_column(String(50))

    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
