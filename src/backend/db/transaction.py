"""
Transaction boundaries for service-layer writes.

A write operation (its invariant checks plus its mutation) runs inside one
``transaction`` block: commit on success, rollback on any exception, so a
failed write never leaves partial state behind.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger(__name__).bind(component="transaction")


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Commit the session's work on success, roll it back on failure.

    Example:
        async with transaction(db):
            await repo.delete_with_votes(candidate_id)
    """
    try:
        yield session
        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.debug("transaction_rolled_back", error_type=type(e).__name__)
        raise
