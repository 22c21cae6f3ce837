"""
Candidate registry service.

Reads are public. Every write first passes the admin check, and the check runs
in the same transaction as the write it guards.
"""

from typing import Any, Mapping, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import InvalidInput, NotFound
from core.logging_config import identity_fingerprint
from db.transaction import transaction
from models.candidate import Candidate
from repositories.candidate_repository import CandidateRepository
from services.auth_gate import AuthGate

logger = structlog.get_logger(__name__)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInput("Candidate name is required")
    return cleaned


class CandidateRegistry:
    """CRUD over candidate records."""

    def __init__(self, db: AsyncSession, gate: AuthGate):
        self.db = db
        self.gate = gate
        self.candidates = CandidateRepository(db)

    async def add(
        self,
        name: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        description_doc_id: Optional[str] = None,
    ) -> Candidate:
        """Create a candidate. Admin only."""
        async with transaction(self.db):
            admin = await self.gate.require_admin()
            candidate = await self.candidates.create(
                name=_clean_name(name),
                description=description,
                image_url=image_url,
                description_doc_id=description_doc_id,
            )

        logger.info("candidate_added", candidate_id=candidate.id, admin=identity_fingerprint(admin))
        return candidate

    async def update(self, candidate_id: int, fields: Mapping[str, Any]) -> Candidate:
        """
        Apply a partial update. Admin only.

        Only keys present in ``fields`` change. A clearable field mapped to
        None is cleared; name can be changed but never cleared.
        """
        async with transaction(self.db):
            admin = await self.gate.require_admin()
            changes = dict(fields)
            if "name" in changes:
                changes["name"] = _clean_name(changes["name"])
            unknown = set(changes) - CandidateRepository.UPDATABLE_FIELDS
            if unknown:
                raise InvalidInput(
                    f"Unknown candidate fields: {', '.join(sorted(unknown))}",
                    context={"fields": sorted(unknown)},
                )
            if not await self.candidates.update_fields(candidate_id, changes):
                raise NotFound("Candidate not found", context={"candidate_id": candidate_id})

        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFound("Candidate not found", context={"candidate_id": candidate_id})
        await self.db.refresh(candidate)

        logger.info(
            "candidate_updated",
            candidate_id=candidate_id,
            fields=sorted(changes),
            admin=identity_fingerprint(admin),
        )
        return candidate

    async def delete(self, candidate_id: int) -> int:
        """
        Delete a candidate and every vote cast for it. Admin only.

        Votes and candidate go in one transaction; on any failure neither is
        removed. Returns the number of votes removed.
        """
        async with transaction(self.db):
            admin = await self.gate.require_admin()
            if not await self.candidates.exists(candidate_id):
                raise NotFound("Candidate not found", context={"candidate_id": candidate_id})
            removed_votes = await self.candidates.delete_with_votes(candidate_id)

        logger.info(
            "candidate_deleted",
            candidate_id=candidate_id,
            removed_votes=removed_votes,
            admin=identity_fingerprint(admin),
        )
        return removed_votes

    async def get(self, candidate_id: int) -> Candidate:
        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFound("Candidate not found", context={"candidate_id": candidate_id})
        return candidate

    async def list(self) -> list[Candidate]:
        """All candidates in creation order. No authorization required."""
        return await self.candidates.list_all()
