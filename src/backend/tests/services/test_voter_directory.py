"""
Tests for the voter directory service.
"""

import asyncio

import pytest

from core.exceptions import AlreadyRegistered, DuplicateVoterId, InvalidInput
from services.voter_directory import VoterDirectory


@pytest.mark.unit
class TestRegisterProfile:
    """Test voter profile registration."""

    async def test_register_creates_non_admin_profile(self, db_session) -> None:
        directory = VoterDirectory(db_session)

        profile = await directory.register_profile("user-1", "V-100", "Ada Lovelace", "+15550101")

        assert profile.identity == "user-1"
        assert profile.voter_id == "V-100"
        assert profile.official_name == "Ada Lovelace"
        assert profile.phone_number == "+15550101"
        assert profile.is_admin is False

    async def test_register_strips_whitespace(self, db_session) -> None:
        directory = VoterDirectory(db_session)

        profile = await directory.register_profile("user-1", "  V-100 ", " Ada ", " 555 ")

        assert profile.voter_id == "V-100"
        assert profile.official_name == "Ada"

    async def test_second_profile_for_identity_fails(self, db_session) -> None:
        directory = VoterDirectory(db_session)
        await directory.register_profile("user-1", "V-100", "Ada", "555")

        with pytest.raises(AlreadyRegistered):
            await directory.register_profile("user-1", "V-200", "Ada", "555")

        profile = await directory.get_profile("user-1")
        assert profile is not None
        assert profile.voter_id == "V-100"

    async def test_duplicate_voter_id_leaves_original_unchanged(self, session_factory) -> None:
        async with session_factory() as session:
            await VoterDirectory(session).register_profile("user-1", "V-100", "Ada", "555-1")

        async with session_factory() as session:
            with pytest.raises(DuplicateVoterId):
                await VoterDirectory(session).register_profile("user-2", "V-100", "Grace", "555-2")

        async with session_factory() as session:
            directory = VoterDirectory(session)
            original = await directory.get_profile("user-1")
            assert original is not None
            assert (original.voter_id, original.official_name, original.phone_number, original.is_admin) == (
                "V-100",
                "Ada",
                "555-1",
                False,
            )
            assert await directory.get_profile("user-2") is None

    @pytest.mark.parametrize(
        "voter_id,name,phone",
        [
            ("", "Ada", "555"),
            ("V-1", "   ", "555"),
            ("V-1", "Ada", ""),
        ],
    )
    async def test_blank_fields_rejected(self, db_session, voter_id, name, phone) -> None:
        directory = VoterDirectory(db_session)

        with pytest.raises(InvalidInput):
            await directory.register_profile("user-1", voter_id, name, phone)

        assert await directory.get_profile("user-1") is None


@pytest.mark.unit
class TestConcurrentRegistration:
    """Uniqueness holds when registrations race."""

    async def test_same_voter_id_from_two_identities(self, session_factory) -> None:
        async def register(identity: str) -> str:
            async with session_factory() as session:
                try:
                    await VoterDirectory(session).register_profile(identity, "V-RACE", identity, "555")
                except DuplicateVoterId:
                    return "duplicate"
                return "ok"

        results = await asyncio.gather(register("user-a"), register("user-b"))

        assert sorted(results) == ["duplicate", "ok"]

    async def test_same_identity_registering_twice(self, session_factory) -> None:
        async def register(voter_id: str) -> str:
            async with session_factory() as session:
                try:
                    await VoterDirectory(session).register_profile("user-a", voter_id, "Ada", "555")
                except AlreadyRegistered:
                    return "already"
                return "ok"

        results = await asyncio.gather(*(register(f"V-{i}") for i in range(5)))

        assert results.count("ok") == 1
        assert results.count("already") == 4


@pytest.mark.unit
class TestLookups:
    """Test profile lookup and admin flag."""

    async def test_get_profile_missing_returns_none(self, db_session) -> None:
        directory = VoterDirectory(db_session)
        assert await directory.get_profile("nobody") is None
        assert await directory.get_profile(None) is None

    async def test_is_admin_flag_false_without_profile(self, db_session) -> None:
        assert await VoterDirectory(db_session).is_admin_flag("nobody") is False

    async def test_is_admin_flag_reflects_profile(self, make_voter, db_session) -> None:
        await make_voter("voter")
        await make_voter("admin", is_admin=True)
        directory = VoterDirectory(db_session)

        assert await directory.is_admin_flag("voter") is False
        assert await directory.is_admin_flag("admin") is True
