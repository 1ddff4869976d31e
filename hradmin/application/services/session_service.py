"""Admin session service: login, per-request activation, and logout.

Ties the read cache to the authenticated admin. Login and every
authenticated request activate the admin's scope (a different admin
clears the cache); logout drops all cached data and clears the scope.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hradmin.application.dtos.admin import AdminResult
from hradmin.application.interfaces import IAdminRepository, IReadCacheScope
from hradmin.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    admin: AdminResult
    access_token: str


class SessionService:
    """Authenticate admins and keep the read cache scoped to the active one."""

    def __init__(
        self,
        admin_repo: IAdminRepository,
        cache: IReadCacheScope,
        create_token: Callable[[dict[str, Any]], str],
    ) -> None:
        self._admin_repo = admin_repo
        self._cache = cache
        self._create_token = create_token

    async def login(self, mobile: str, password: str) -> LoginResult:
        """Authenticate by mobile/password, activate the admin's scope, issue a token.

        Raises:
            AuthenticationException: If the credentials do not match an admin.
        """
        admin = await self._admin_repo.authenticate(mobile, password)
        if admin is None:
            raise AuthenticationException("Invalid mobile number or password")
        self.activate(admin.id)
        token = self._create_token({"sub": admin.id, "role": admin.role.value})
        logger.info("Admin %s logged in", admin.id)
        return LoginResult(admin=admin, access_token=token)

    def activate(self, admin_id: str) -> None:
        """Make admin_id the cache scope (called for every authenticated request)."""
        self._cache.set_scope(admin_id)

    def logout(self) -> None:
        """Drop all cached reads, then clear the scope."""
        self._cache.invalidate_all()
        self._cache.set_scope(None)
        logger.info("Admin logged out; read cache cleared")
