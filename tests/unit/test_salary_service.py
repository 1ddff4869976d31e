"""Tests for SalaryService: revisions are recorded and applied to the employment."""

import pytest

from hradmin.application.services.salary_service import SalaryService
from hradmin.domain.exceptions import ResourceNotFoundException
from hradmin.infrastructure.cache.scoped_read_cache import ScopedReadCache
from hradmin.infrastructure.firebase.repositories import (
    FirestoreEmploymentRepository,
    FirestoreSalaryHistoryRepository,
)
from tests.fakes import FakeFirestoreClient


@pytest.fixture
def employments(fake_firestore: FakeFirestoreClient) -> FirestoreEmploymentRepository:
    cache = ScopedReadCache(60.0)
    cache.set_scope("admin-1")
    return FirestoreEmploymentRepository(fake_firestore, cache)


@pytest.fixture
def service(
    fake_firestore: FakeFirestoreClient, employments: FirestoreEmploymentRepository
) -> SalaryService:
    return SalaryService(employments, FirestoreSalaryHistoryRepository(fake_firestore))


async def test_add_revision_updates_employment(
    service: SalaryService, employments: FirestoreEmploymentRepository
) -> None:
    employment = await employments.create({"employee_id": "emp-1", "basic": 20000.0})
    await employments.get(employment.id)

    entry = await service.add_revision(
        employment.id,
        {"basic": 25000.0, "hra": 5000.0, "effective_date": "2024-04-01", "note": "Annual"},
    )

    assert entry.employment_id == employment.id
    assert entry.note == "Annual"
    current = await employments.get(employment.id)
    assert current.basic == 25000.0
    assert current.hra == 5000.0


async def test_effective_date_and_note_stay_on_history(
    service: SalaryService,
    employments: FirestoreEmploymentRepository,
    fake_firestore: FakeFirestoreClient,
) -> None:
    employment = await employments.create({"employee_id": "emp-1"})
    await service.add_revision(employment.id, {"basic": 1.0, "effective_date": "2024-01-01", "note": "x"})
    fields = fake_firestore.store["employments"][employment.id]["fields"]
    assert "effectiveDate" not in fields
    assert "note" not in fields


async def test_list_revisions_newest_first(
    service: SalaryService, employments: FirestoreEmploymentRepository
) -> None:
    employment = await employments.create({"employee_id": "emp-1"})
    await service.add_revision(employment.id, {"basic": 1.0, "effective_date": "2023-04-01"})
    await service.add_revision(employment.id, {"basic": 2.0, "effective_date": "2024-04-01"})
    other = await employments.create({"employee_id": "emp-2"})
    await service.add_revision(other.id, {"basic": 9.0, "effective_date": "2025-01-01"})

    revisions = await service.list_revisions(employment.id)

    assert [r.basic for r in revisions] == [2.0, 1.0]


async def test_missing_employment_rejected(service: SalaryService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.add_revision("nope", {"basic": 1.0})
    with pytest.raises(ResourceNotFoundException):
        await service.list_revisions("nope")
