"""Error codes and exception handlers shared by all routes.

Validation and not-found errors are mapped inside the routes. Storage errors
propagate unchanged to ``storage_error_handler`` which answers with an opaque
code and keeps the details in the logs.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.model.errors import StorageError

logger = logging.getLogger(__name__)

ERR_INVALID_BODY = "invalidBody"
ERR_INVALID_PARAMS = "invalidParams"
ERR_STORAGE = "storageError"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report bind failures as 400 instead of FastAPI's default 422."""
    in_query = any(err.get('loc', ('',))[0] == 'query' for err in exc.errors())
    detail = ERR_INVALID_PARAMS if in_query else ERR_INVALID_BODY
    logger.info("Request binding failed", extra={"path": request.url.path, "detail": detail})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure", extra={"path": request.url.path, "method": request.method, "error": str(exc)})
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": ERR_STORAGE})
