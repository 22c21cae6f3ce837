"""
Tests for the ballot box service.
"""

import asyncio

import pytest
from sqlalchemy import func, select

from core.exceptions import AlreadyVoted, NotFound, ProfileRequired, Unauthenticated
from models.vote import Vote
from repositories.candidate_repository import CandidateRepository
from services.ballot_box import BallotBox


async def add_candidate(session_factory, name: str) -> int:
    async with session_factory() as session:
        candidate = await CandidateRepository(session).create(name=name)
        await session.commit()
        return candidate.id


async def votes_for(session_factory, identity: str) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count(Vote.id)).where(Vote.voter_identity == identity))
        return result.scalar() or 0


@pytest.mark.unit
class TestCastVote:
    """Test the single-choice rules."""

    async def test_cast_vote_records_vote(self, session_factory, make_voter) -> None:
        alice = await add_candidate(session_factory, "Alice")
        await make_voter("voter")

        async with session_factory() as session:
            vote = await BallotBox(session).cast_vote("voter", alice)

        assert vote.candidate_id == alice
        assert vote.voter_identity == "voter"
        assert await votes_for(session_factory, "voter") == 1

    async def test_anonymous_unauthenticated(self, db_session) -> None:
        with pytest.raises(Unauthenticated):
            await BallotBox(db_session).cast_vote(None, 1)

    async def test_profile_required(self, session_factory) -> None:
        alice = await add_candidate(session_factory, "Alice")

        async with session_factory() as session:
            with pytest.raises(ProfileRequired):
                await BallotBox(session).cast_vote("unregistered", alice)

        assert await votes_for(session_factory, "unregistered") == 0

    async def test_unknown_candidate(self, session_factory, make_voter) -> None:
        await make_voter("voter")

        async with session_factory() as session:
            with pytest.raises(NotFound):
                await BallotBox(session).cast_vote("voter", 404)

        assert await votes_for(session_factory, "voter") == 0

    async def test_second_vote_rejected(self, session_factory, make_voter) -> None:
        alice = await add_candidate(session_factory, "Alice")
        bob = await add_candidate(session_factory, "Bob")
        await make_voter("voter")

        async with session_factory() as session:
            await BallotBox(session).cast_vote("voter", alice)
        async with session_factory() as session:
            with pytest.raises(AlreadyVoted):
                await BallotBox(session).cast_vote("voter", bob)

        assert await votes_for(session_factory, "voter") == 1

    async def test_admin_may_vote(self, session_factory, make_voter) -> None:
        alice = await add_candidate(session_factory, "Alice")
        await make_voter("admin", is_admin=True)

        async with session_factory() as session:
            await BallotBox(session).cast_vote("admin", alice)

        assert await votes_for(session_factory, "admin") == 1


@pytest.mark.unit
class TestConcurrentVoting:
    """Exactly one vote per identity under concurrent casting."""

    async def test_concurrent_votes_same_identity(self, session_factory, make_voter) -> None:
        alice = await add_candidate(session_factory, "Alice")
        bob = await add_candidate(session_factory, "Bob")
        await make_voter("voter")

        async def cast(candidate_id: int) -> str:
            async with session_factory() as session:
                try:
                    await BallotBox(session).cast_vote("voter", candidate_id)
                except AlreadyVoted:
                    return "already_voted"
                return "ok"

        results = await asyncio.gather(*(cast(alice if i % 2 else bob) for i in range(10)))

        assert results.count("ok") == 1
        assert results.count("already_voted") == 9
        assert await votes_for(session_factory, "voter") == 1

    async def test_unique_constraint_is_the_guard(self, session_factory, make_voter) -> None:
        """Even bypassing the service, storage refuses a second vote."""
        from sqlalchemy.exc import IntegrityError

        from repositories.vote_repository import VoteRepository

        alice = await add_candidate(session_factory, "Alice")
        await make_voter("voter")

        async with session_factory() as session:
            await VoteRepository(session).create("voter", alice)
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(IntegrityError):
                await VoteRepository(session).create("voter", alice)

    async def test_integrity_error_for_deleted_candidate_maps_to_not_found(
        self, session_factory, make_voter, monkeypatch
    ) -> None:
        """A candidate removed between the check and the insert is NotFound."""
        alice = await add_candidate(session_factory, "Alice")
        await make_voter("voter")

        async def always_exists(self, candidate_id: int) -> bool:
            return True

        async with session_factory() as session:
            await CandidateRepository(session).delete_with_votes(alice)
            await session.commit()

        monkeypatch.setattr(CandidateRepository, "exists", always_exists)

        async with session_factory() as session:
            with pytest.raises(NotFound):
                await BallotBox(session).cast_vote("voter", alice)

        assert await votes_for(session_factory, "voter") == 0


@pytest.mark.unit
class TestHasVoted:
    """Test vote status lookup."""

    async def test_has_voted_anonymous_is_false(self, db_session) -> None:
        assert await BallotBox(db_session).has_voted(None) is False

    async def test_has_voted_transitions(self, session_factory, make_voter) -> None:
        alice = await add_candidate(session_factory, "Alice")
        await make_voter("voter")

        async with session_factory() as session:
            assert await BallotBox(session).has_voted("voter") is False
        async with session_factory() as session:
            await BallotBox(session).cast_vote("voter", alice)
        async with session_factory() as session:
            assert await BallotBox(session).has_voted("voter") is True
