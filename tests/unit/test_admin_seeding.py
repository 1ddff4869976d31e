"""Tests for admin seeding and admin authentication."""

from hradmin.domain.enums import AdminRole
from hradmin.infrastructure.firebase.repositories import FirestoreAdminRepository
from hradmin.infrastructure.firebase.services import AdminSeed, ensure_default_admins
from tests.fakes import FakeFirestoreClient

DEFAULTS = [
    AdminSeed(name="Super Admin", mobile="9000000001", role=AdminRole.SUPER_ADMIN, password="pw-1"),
    AdminSeed(name="Admin", mobile="9000000002", role=AdminRole.ADMIN, password="pw-2"),
]
TEST_ADMIN = AdminSeed(
    name="Test Admin", mobile="9999999999", role=AdminRole.TEST_ADMIN, password="pw-test"
)


async def test_seeds_defaults_and_test_admin_into_empty_collection(
    fake_firestore: FakeFirestoreClient,
) -> None:
    repo = FirestoreAdminRepository(fake_firestore)
    result = await ensure_default_admins(repo, DEFAULTS, test_admin=TEST_ADMIN)
    assert result.created == ("9000000001", "9000000002", "9999999999")
    assert result.skipped == ()
    stored = fake_firestore.store["admins"].values()
    assert all("hashed_password" in doc["fields"] for doc in stored)


async def test_existing_admins_skip_defaults_but_ensure_test_admin(
    fake_firestore: FakeFirestoreClient,
) -> None:
    repo = FirestoreAdminRepository(fake_firestore)
    await repo.add_admin("Someone", "9000000009", AdminRole.ADMIN, "pw")

    result = await ensure_default_admins(repo, DEFAULTS, test_admin=TEST_ADMIN)
    assert result.created == ("9999999999",)

    again = await ensure_default_admins(repo, DEFAULTS, test_admin=TEST_ADMIN)
    assert again.created == ()
    assert again.skipped == ("9999999999",)


async def test_authenticate(fake_firestore: FakeFirestoreClient) -> None:
    repo = FirestoreAdminRepository(fake_firestore)
    admin = await repo.add_admin("Admin", "9000000001", AdminRole.ADMIN, "right")

    assert await repo.authenticate("9000000001", "right") == admin
    assert await repo.authenticate("9000000001", "wrong") is None
    assert await repo.authenticate("9111111111", "right") is None
