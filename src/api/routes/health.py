"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _check(name: str, ping) -> dict:
    if ping is None:
        return {"status": "unhealthy", "message": "Connection failed or not configured"}
    try:
        ping()
        return {"status": "healthy", "message": "Connection successful"}
    except Exception as e:
        logger.warning("Health check failed", extra={"dependency": name, "error": str(e)[:200]})
        return {"status": "unhealthy", "message": f"Connection error: {str(e)[:200]}"}


@router.get("")
def health(request: Request):
    """Health check endpoint with dependency status."""
    mongo_client = getattr(request.app.state, 'mongo_client', None)
    redis_client = getattr(request.app.state, 'redis', None)

    mongo_ping = None
    if mongo_client is not None:
        mongo_ping = lambda: mongo_client.admin.command('ping')  # noqa: E731
    redis_ping = redis_client.ping if redis_client is not None else None

    services = {
        "mongodb": _check("mongodb", mongo_ping),
        "redis": _check("redis", redis_ping),
    }
    healthy = all(s["status"] == "healthy" for s in services.values())

    return JSONResponse(
        content={
            "status": "healthy" if healthy else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "services": services,
        },
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
