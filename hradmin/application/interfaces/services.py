"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Protocol


class IReadCacheScope(Protocol):
    """Protocol for binding the read cache to the active admin."""

    @property
    def scope(self) -> str | None:
        """Return the active scope id, or None."""

    def set_scope(self, scope_id: str | None) -> None:
        """Activate scope_id; a change (or None) clears every cached entry."""

    def invalidate_all(self) -> None:
        """Drop every cached entry, keeping the scope."""
