"""Ids for documents hradmin creates under its own id (salary revisions)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string."""
    return _next_cuid()
