"""Seed default admin accounts into Firestore.

Runs from scripts.seed_admins. Default admins are added only when the
admins collection is empty; the test admin is ensured on every run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hradmin.domain.enums import AdminRole
from hradmin.domain.exceptions import AdminAlreadyExistsException
from hradmin.infrastructure.firebase.repositories.admin_repo_firestore import (
    FirestoreAdminRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminSeed:
    """An admin to create if missing."""

    name: str
    mobile: str
    role: AdminRole
    password: str


@dataclass(frozen=True)
class SeedResult:
    created: tuple[str, ...]
    skipped: tuple[str, ...]


async def _add_missing(
    repo: FirestoreAdminRepository, seeds: Iterable[AdminSeed]
) -> tuple[list[str], list[str]]:
    created: list[str] = []
    skipped: list[str] = []
    for seed in seeds:
        try:
            await repo.add_admin(
                name=seed.name, mobile=seed.mobile, role=seed.role, password=seed.password
            )
            created.append(seed.mobile)
        except AdminAlreadyExistsException:
            logger.info("Admin with mobile %s already exists, skipping", seed.mobile)
            skipped.append(seed.mobile)
    return created, skipped


async def ensure_default_admins(
    repo: FirestoreAdminRepository,
    defaults: Iterable[AdminSeed],
    test_admin: AdminSeed | None = None,
) -> SeedResult:
    """Seed defaults into an empty admins collection and ensure the test admin.

    Args:
        repo: Admin repository.
        defaults: Admins to add when no admin exists yet.
        test_admin: Admin to add whenever its mobile is not registered.

    Returns:
        Mobiles created and skipped.
    """
    created: list[str] = []
    skipped: list[str] = []
    if await repo.has_any():
        logger.info("Admins already present; default admins not seeded")
    else:
        logger.info("No admin users found, creating default admins")
        c, s = await _add_missing(repo, defaults)
        created += c
        skipped += s
    if test_admin is not None:
        c, s = await _add_missing(repo, [test_admin])
        created += c
        skipped += s
    return SeedResult(created=tuple(created), skipped=tuple(skipped))
