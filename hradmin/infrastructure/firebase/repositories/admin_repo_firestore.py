"""Firestore-backed admin repository (authentication by mobile number)."""

from __future__ import annotations

import asyncio
import logging

from hradmin.application.dtos.admin import AdminResult
from hradmin.domain.enums import AdminRole
from hradmin.domain.exceptions import AdminAlreadyExistsException
from hradmin.infrastructure.firebase._rest_client import (
    DocumentSnapshot,
    FirestoreRESTClient,
)
from hradmin.infrastructure.firebase.collections import COLLECTION_ADMINS
from hradmin.infrastructure.security.password import get_password_hash, verify_password

logger = logging.getLogger(__name__)

_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison (timing-attack mitigation)."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


class FirestoreAdminRepository:
    """Admins collection: lookup, authentication and seeding."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_ADMINS)

    def _to_result(self, doc_id: str, data: dict) -> AdminResult:
        role = data.get("role", AdminRole.ADMIN.value)
        return AdminResult(
            id=doc_id,
            name=data.get("name", ""),
            mobile=data.get("mobile", ""),
            role=AdminRole(role) if role in AdminRole.values() else AdminRole.ADMIN,
        )

    async def _find_by_mobile(self, mobile: str) -> DocumentSnapshot | None:
        q = self._coll.where("mobile", "==", mobile).limit(1)
        async for snapshot in q.stream():
            return snapshot
        return None

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        """Return admin by ID."""
        doc = await self._coll.document(admin_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def authenticate(self, mobile: str, password: str) -> AdminResult | None:
        """Verify mobile/password; return the admin or None."""
        snapshot = await self._find_by_mobile(mobile)
        if snapshot is None:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            logger.info("Login failed: no admin with this mobile")
            return None
        data = snapshot.to_dict()
        stored_hash = data.get("hashed_password", "")
        if not await asyncio.to_thread(verify_password, password, stored_hash):
            logger.info("Login failed: invalid password for admin %s", snapshot.id)
            return None
        return self._to_result(snapshot.id, data)

    async def has_any(self) -> bool:
        """Return True if at least one admin document exists."""
        async for _ in self._coll.stream():
            return True
        return False

    async def add_admin(
        self,
        name: str,
        mobile: str,
        role: AdminRole,
        password: str,
    ) -> AdminResult:
        """Create an admin with a hashed password.

        Raises:
            AdminAlreadyExistsException: If the mobile number is already registered.
        """
        if await self._find_by_mobile(mobile) is not None:
            raise AdminAlreadyExistsException(mobile)
        hashed = await asyncio.to_thread(get_password_hash, password)
        ref = await self._coll.add({
            "name": name,
            "mobile": mobile,
            "role": role.value,
            "hashed_password": hashed,
        })
        logger.info("Added admin %s with ID %s", name, ref.id)
        return AdminResult(id=ref.id, name=name, mobile=mobile, role=role)
