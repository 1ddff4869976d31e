"""Infrastructure: Firestore, read cache, and security adapters."""
