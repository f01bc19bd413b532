"""MongoDB client lifecycle and collection access."""

from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from jobboardly.config import settings
from jobboardly.core.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)

USERS = "users"
COMPANIES = "companies"
JOBS = "jobs"
APPLICATIONS = "applications"
NOTIFICATIONS = "notifications"


class MongoDB:
    """
    Holds the motor client for the lifetime of the app.

    Connected once at startup (``connect``) and closed at shutdown.
    """

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        if self.client is not None:
            return

        self.client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            maxPoolSize=settings.MONGODB_MAX_POOL_SIZE,
            minPoolSize=settings.MONGODB_MIN_POOL_SIZE,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            tz_aware=True,
        )
        self.db = self.client[settings.MONGODB_DATABASE]
        await self._create_indexes()
        logger.info("mongodb_connected", database=settings.MONGODB_DATABASE)

    async def _create_indexes(self) -> None:
        try:
            await self.db[JOBS].create_index([("status", ASCENDING), ("createdAt", DESCENDING)])
            await self.db[JOBS].create_index([("status", ASCENDING), ("postedDate", DESCENDING)])
            await self.db[JOBS].create_index("companyId")
            await self.db[COMPANIES].create_index([("status", ASCENDING), ("createdAt", DESCENDING)])
            await self.db[USERS].create_index([("role", ASCENDING), ("createdAt", DESCENDING)])
            # One application per (job, applicant)
            await self.db[APPLICATIONS].create_index(
                [("jobId", ASCENDING), ("applicantId", ASCENDING)], unique=True
            )
            await self.db[APPLICATIONS].create_index("applicantId")
            await self.db[NOTIFICATIONS].create_index([("userId", ASCENDING), ("createdAt", DESCENDING)])
        except PyMongoError as e:
            logger.warning("mongodb_index_creation_failed", error=str(e))

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("mongodb_disconnected")


mongodb = MongoDB()


async def get_database() -> AsyncIOMotorDatabase:
    """FastAPI dependency returning the connected database."""
    if mongodb.db is None:
        raise StoreUnavailableError("Database is not connected")
    return mongodb.db


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Translate driver failures into StoreUnavailableError with the driver's
    message. DuplicateKeyError passes through for callers that handle it.
    """
    try:
        yield
    except DuplicateKeyError:
        raise
    except PyMongoError as e:
        logger.error("mongodb_operation_failed", operation=operation, error=str(e))
        raise StoreUnavailableError(str(e)) from e
