"""FastAPI application entry point."""

import logging
import sys
import tomllib
from contextlib import asynccontextmanager
from importlib import metadata
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# main.py is at <root>/src/api/main.py
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import request_validation_handler, storage_error_handler
from api.routes import health, users
from adapter.mongodb.connection import close_mongodb_client, create_mongodb_client, get_database
from adapter.mongodb.indexes import ensure_all_indexes
from adapter.pubsub.connection import close_redis_client, create_redis_client
from domain.model.errors import PublishError, StorageError
from utils.config import Settings
from utils.logging import setup_structured_logging

SERVICE_NAME = "Users microservice API"
API_PREFIX = "/api/v1"

settings = Settings.from_env()
setup_structured_logging(settings.log_level, service="users-api")

logger = logging.getLogger(__name__)


def _read_version() -> str:
    """Version from pyproject.toml, or from package metadata when installed."""
    pyproject = _src_path.parent / "pyproject.toml"
    try:
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        return metadata.version("users-microservice")


VERSION = _read_version()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared MongoDB and Redis clients at startup, close them at shutdown."""
    app.state.settings = settings
    app.state.mongo_client = None
    app.state.db = None
    app.state.redis = None

    try:
        app.state.mongo_client = create_mongodb_client(settings)
        app.state.db = get_database(app.state.mongo_client, settings)
        if ensure_all_indexes(app.state.db):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    except StorageError:
        logger.warning("MongoDB unavailable, user routes will answer 503")

    try:
        app.state.redis = create_redis_client(settings)
    except PublishError:
        logger.warning("Redis unavailable, user notifications will be dropped")

    yield  # App runs here

    close_redis_client(app.state.redis)
    close_mongodb_client(app.state.mongo_client)


app = FastAPI(
    title=SERVICE_NAME,
    description="CRUD API for user records with change notifications",
    version=VERSION,
    lifespan=lifespan,
)

if settings.cors_origins == "*":
    cors_origins = ["*"]
    allow_credentials = False  # Browsers don't support credentials with wildcard
else:
    cors_origins = [origin.strip() for origin in settings.cors_origins.split(",")]
    allow_credentials = True

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)

app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(StorageError, storage_error_handler)

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(users.router)
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn
    # Access logs are off; application logs go through structured logging
    uvicorn.run(app, host="0.0.0.0", port=settings.port, access_log=False)


if __name__ == "__main__":
    run()
