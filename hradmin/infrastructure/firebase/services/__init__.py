"""Firestore bootstrap services."""

from hradmin.infrastructure.firebase.services.admin_init_firestore import (
    AdminSeed,
    SeedResult,
    ensure_default_admins,
)

__all__ = ["AdminSeed", "SeedResult", "ensure_default_admins"]
