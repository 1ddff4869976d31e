"""Firestore integration: REST client, collection names, repositories."""

from hradmin.infrastructure.firebase._rest_client import (
    CollectionReference,
    DocumentReference,
    DocumentSnapshot,
    FirestoreRESTClient,
)
from hradmin.infrastructure.firebase.client import create_firestore_client

__all__ = [
    "CollectionReference",
    "DocumentReference",
    "DocumentSnapshot",
    "FirestoreRESTClient",
    "create_firestore_client",
]
