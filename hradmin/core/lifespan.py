"""Application lifespan: startup and shutdown.

Wires infrastructure only: the Firestore client and telemetry shutdown.
No business logic here. The read cache is created in create_app() since
it holds no I/O resources.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from hradmin.core.config import get_settings
from hradmin.infrastructure.firebase.client import create_firestore_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: Firestore client (None when not configured). Shutdown: clear
    the read cache scope, close the Firestore HTTP client, flush telemetry.
    """
    settings = get_settings()

    # ---- Startup ----
    if getattr(app.state, "firestore", None) is None:
        app.state.firestore = create_firestore_client(settings)

    yield

    # ---- Shutdown ----
    app.state.read_cache.set_scope(None)

    if app.state.firestore is not None:
        await app.state.firestore.aclose()
        app.state.firestore = None
        logger.info("Firestore HTTP client closed")

    telemetry = getattr(app.state, "telemetry", None)
    if telemetry is not None:
        telemetry.shutdown()
        app.state.telemetry = None
        logger.info("Telemetry shutdown complete")
