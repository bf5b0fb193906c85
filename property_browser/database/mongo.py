import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from property_browser.config import Settings
from property_browser.errors import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB handle owned by the application.

    - connect() creates the client and pings the server once; later calls are no-ops
    - a failed connect drops the client so the next request tries again
    - close() releases the client on shutdown
    """

    def __init__(self, uri: str | None, db_name: str, collection_name: str):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name

        self._client: AsyncIOMotorClient | None = None
        self._connected = False
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(
            uri=settings.MONGODB_URI,
            db_name=settings.MONGODB_DB,
            collection_name=settings.MONGODB_COLLECTION,
        )

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        if self._connected:
            return

        async with self._lock:
            if self._connected:
                return

            if not self.uri:
                raise ConfigurationError("MONGODB_URI environment variable not configured")

            try:
                self._client = AsyncIOMotorClient(self.uri)
                await self._client.admin.command("ping")
            except PyMongoError as e:
                self._drop_client()
                raise DatabaseConnectionError(f"Failed to connect to MongoDB: {e}") from e

            self._connected = True
            logger.info(f"Connected to MongoDB database '{self.db_name}'")

    @property
    def collection(self):
        if not self._connected or self._client is None:
            raise DatabaseConnectionError("MongoDB connection is not open")
        return self._client[self.db_name][self.collection_name]

    async def close(self) -> None:
        async with self._lock:
            if self._client is None:
                return
            self._drop_client()
            logger.info("MongoDB connection closed")

    def _drop_client(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._connected = False


def get_mongo(request: Request) -> MongoConnection:
    return request.app.state.mongo
