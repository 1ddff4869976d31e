"""Shared utilities: datetime and generators."""

from hradmin.shared.utils.datetime import ensure_utc, parse_iso_date, utc_now
from hradmin.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_iso_date",
]
