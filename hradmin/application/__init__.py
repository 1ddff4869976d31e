"""Application layer: DTOs and services (no HTTP, no Firestore wire details)."""
