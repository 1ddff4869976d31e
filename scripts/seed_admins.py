"""Seed default admins and the test admin into Firestore.

Usage:
    uv run python -m scripts.seed_admins [default_password]
Default admins are created only when the admins collection is empty. If
default_password is omitted, a random one is generated and printed. The
test admin (TEST_ADMIN_MOBILE / TEST_ADMIN_PASSWORD) is ensured on every
run; it is skipped when TEST_ADMIN_PASSWORD is not set.
"""

import asyncio
import secrets
import sys

from hradmin.core.config import get_settings
from hradmin.core.constants import DEFAULT_ADMINS
from hradmin.domain.enums import AdminRole
from hradmin.infrastructure.firebase.client import create_firestore_client
from hradmin.infrastructure.firebase.repositories import FirestoreAdminRepository
from hradmin.infrastructure.firebase.services import AdminSeed, ensure_default_admins
from hradmin.shared.telemetry import setup_logging


async def main() -> None:
    """Seed admins using the configured Firestore credentials."""
    settings = get_settings()
    setup_logging()
    client = create_firestore_client(settings)
    if client is None:
        print("Firestore is not configured", file=sys.stderr)
        sys.exit(1)

    default_password = sys.argv[1] if len(sys.argv) > 1 else secrets.token_urlsafe(12)
    defaults = [
        AdminSeed(
            name=a["name"],
            mobile=a["mobile"],
            role=AdminRole(a["role"]),
            password=default_password,
        )
        for a in DEFAULT_ADMINS
    ]
    test_password = settings.test_admin_password.get_secret_value()
    test_admin = (
        AdminSeed(
            name="Test Admin",
            mobile=settings.test_admin_mobile,
            role=AdminRole.TEST_ADMIN,
            password=test_password,
        )
        if test_password
        else None
    )
    if test_admin is None:
        print("TEST_ADMIN_PASSWORD not set; test admin skipped", file=sys.stderr)

    try:
        result = await ensure_default_admins(
            FirestoreAdminRepository(client), defaults, test_admin=test_admin
        )
    finally:
        await client.aclose()

    for mobile in result.created:
        print(f"Created admin: {mobile}")
    for mobile in result.skipped:
        print(f"Already exists: {mobile}")
    if len(sys.argv) <= 1 and any(a["mobile"] in result.created for a in DEFAULT_ADMINS):
        print(f"Default admin password: {default_password}")


if __name__ == "__main__":
    asyncio.run(main())
