import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from shortlink_app.config import settings
from shortlink_app.dependencies import get_link_store
from shortlink_app.exceptions import StorageError
from shortlink_app.schemas.link import HealthResponse
from shortlink_app.storage.link_store import LinkStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

STARTED_AT = datetime.now(timezone.utc)
_started_monotonic = time.monotonic()


@router.get("/healthz", response_model=HealthResponse)
def healthz(store: LinkStore = Depends(get_link_store)):
    """Liveness plus a database round-trip"""
    try:
        store.ping()
    except StorageError:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": "DB connection failed"}
        )

    return HealthResponse(
        ok=True,
        version=settings.app_version,
        uptime=round(time.monotonic() - _started_monotonic),
        startedAt=STARTED_AT,
        now=datetime.now(timezone.utc)
    )
