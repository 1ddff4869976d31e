"""Salary revisions: record history and apply the new breakdown to the employment."""

from __future__ import annotations

import logging
from typing import Any

from hradmin.application.dtos.salary import SalaryHistoryResult
from hradmin.application.interfaces import (
    IEmploymentRepository,
    ISalaryHistoryRepository,
)

logger = logging.getLogger(__name__)

# History-only keys that are not copied onto the employment.
_HISTORY_ONLY_FIELDS = frozenset({"effective_date", "note"})


class SalaryService:
    """Add salary revisions and list them per employment."""

    def __init__(
        self,
        employment_repo: IEmploymentRepository,
        salary_history_repo: ISalaryHistoryRepository,
    ) -> None:
        self._employment_repo = employment_repo
        self._salary_history_repo = salary_history_repo

    async def add_revision(
        self, employment_id: str, data: dict[str, Any]
    ) -> SalaryHistoryResult:
        """Store a revision and update the employment's current salary fields.

        Raises:
            ResourceNotFoundException: If the employment does not exist.
        """
        await self._employment_repo.get(employment_id)
        entry = await self._salary_history_repo.add(employment_id, data)
        components = {k: v for k, v in data.items() if k not in _HISTORY_ONLY_FIELDS}
        if components:
            await self._employment_repo.update(employment_id, components)
        logger.info("Salary revision %s added to employment %s", entry.id, employment_id)
        return entry

    async def list_revisions(self, employment_id: str) -> list[SalaryHistoryResult]:
        """Return revisions for the employment (newest first).

        Raises:
            ResourceNotFoundException: If the employment does not exist.
        """
        await self._employment_repo.get(employment_id)
        return await self._salary_history_repo.list_by_employment(employment_id)
