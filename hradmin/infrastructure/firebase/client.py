"""Firestore client (REST-based, no firebase-admin).

Initialized at app startup using either FIREBASE_SERVICE_ACCOUNT_KEY (JSON
string) or FIREBASE_SERVICE_ACCOUNT_PATH (file path). The client is created
once and injected; nothing here is read by repositories directly.
"""

import json
import logging
from pathlib import Path

from hradmin.core.config import Settings
from hradmin.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    service_account_credentials,
)

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def create_firestore_client(settings: Settings) -> FirestoreRESTClient | None:
    """Build the Firestore client (REST API + google-auth).

    Safe to call when no credentials are configured (returns None). On
    invalid or malformed credentials, logs the exception and returns None
    so the app can start and report 503 on data routes.
    """
    try:
        key_dict = _load_key_dict(settings)
        if not key_dict:
            logger.warning("Firestore credentials not configured; data routes disabled")
            return None
        project_id = key_dict.get("project_id")
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return None
        client = FirestoreRESTClient(project_id, service_account_credentials(key_dict))
        logger.info("Firestore client initialized for project %s", project_id)
        return client
    except Exception:
        logger.exception("Firebase initialization failed")
        return None
