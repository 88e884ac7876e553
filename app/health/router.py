"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.constants import Routes
from app.db.engine import ping

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])

logger = logging.getLogger("app.health")


@router.get("")
def health(request: Request):
    """Health check endpoint with database connectivity verification."""
    timestamp = datetime.now(UTC).isoformat()
    try:
        ping(request.app.state.engine)
    except SQLAlchemyError:
        logger.warning("Health check: database unreachable", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error", "timestamp": timestamp},
        )
    return {"status": "ok", "database": "ok", "timestamp": timestamp}
