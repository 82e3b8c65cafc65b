"""Service configuration read from environment variables.

Values come from the process environment, optionally seeded from a ``.env``
file via python-dotenv. ``Settings.from_env()`` is called once at startup and
the resulting object is passed to whatever needs it.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    mongo_url: str = 'mongodb://localhost:27017'
    mongo_database: str = 'users-microservice'
    mongo_timeout_ms: int = 5000
    redis_url: str = 'redis://localhost:6379/0'
    redis_timeout_seconds: float = 2.0
    cors_origins: str = '*'
    port: int = 4040
    log_level: str = 'INFO'

    @staticmethod
    def from_env(env_file: str | None = None) -> 'Settings':
        """Build settings from the environment, loading ``.env`` first."""
        load_dotenv(env_file)
        defaults = Settings()
        return Settings(
            mongo_url=os.getenv('MONGO_URL', defaults.mongo_url),
            mongo_database=os.getenv('MONGODB_DATABASE', defaults.mongo_database),
            mongo_timeout_ms=int(os.getenv('MONGO_TIMEOUT_MS', defaults.mongo_timeout_ms)),
            redis_url=os.getenv('REDIS_URL', defaults.redis_url),
            redis_timeout_seconds=float(os.getenv('REDIS_TIMEOUT_SECONDS', defaults.redis_timeout_seconds)),
            cors_origins=os.getenv('CORS_ORIGINS', defaults.cors_origins),
            port=int(os.getenv('PORT', defaults.port)),
            log_level=os.getenv('LOG_LEVEL', defaults.log_level).upper(),
        )
