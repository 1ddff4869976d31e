"""Rate limiting: the shared SlowAPI limiter plus a per-mobile login window.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Setting limiter.enabled = False (tests,
RATE_LIMIT_ENABLED=false) turns off both.
"""

import time
from collections import defaultdict, deque
from threading import Lock

from fastapi import HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"
LOGIN_PER_MOBILE_LIMIT = 5  # failed or not, per mobile number per window
LOGIN_PER_MOBILE_WINDOW_SEC = 60

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)

_login_attempts: defaultdict[str, deque[float]] = defaultdict(deque)
_login_attempts_lock = Lock()


def _prune_expired(now: float) -> None:
    """Drop attempts older than the window and forget mobiles with none left."""
    cutoff = now - LOGIN_PER_MOBILE_WINDOW_SEC
    for mobile in list(_login_attempts):
        attempts = _login_attempts[mobile]
        while attempts and attempts[0] <= cutoff:
            attempts.popleft()
        if not attempts:
            del _login_attempts[mobile]


def check_login_rate_per_mobile(mobile: str) -> None:
    """Raise 429 when this mobile number has used up its login attempts.

    Complements the per-IP limit: guessing one admin's password from many
    addresses is still capped.
    """
    if not limiter.enabled:
        return
    now = time.monotonic()
    with _login_attempts_lock:
        _prune_expired(now)
        attempts = _login_attempts[mobile]
        if len(attempts) >= LOGIN_PER_MOBILE_LIMIT:
            raise HTTPException(
                status_code=429,
                detail="Too many login attempts for this mobile number; try again later",
            )
        attempts.append(now)
