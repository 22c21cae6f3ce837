"""
Grant or revoke the admin capability for a registered voter.

Admin promotion is an operator action, not something the API exposes. The
voter must already have registered a profile.

Run with: python -m scripts.promote_admin <identity> [--revoke]
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from db.session import close_db, get_session_factory
from db.transaction import transaction
from repositories.voter_repository import VoterRepository


async def set_admin(
    identity: str,
    is_admin: bool = True,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> bool:
    """Set the admin flag on ``identity``'s profile. Returns False if there is no profile."""
    factory = session_factory or get_session_factory()
    async with factory() as session:
        async with transaction(session):
            return await VoterRepository(session).set_admin_flag(identity, is_admin)


async def main(identity: str, revoke: bool) -> int:
    try:
        changed = await set_admin(identity, is_admin=not revoke)
    finally:
        await close_db()

    if not changed:
        print(f"- No voter profile found for identity {identity!r}")
        return 1

    action = "Revoked admin from" if revoke else "Granted admin to"
    print(f"✓ {action} {identity!r}")
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Grant or revoke voter admin capability")
    parser.add_argument("identity", help="Identity (token subject) of the voter")
    parser.add_argument("--revoke", action="store_true", help="Revoke instead of grant")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.identity, args.revoke)))
