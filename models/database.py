"""Database connection lifecycle."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING

from config.settings import settings
from models.store import Store
from utils.logger import setup_logger

logger = setup_logger(__name__)


class Database:
    """Owns the MongoDB client for the lifetime of the process."""

    def __init__(self, url: str, default_database: str = settings.default_database):
        self.url = url
        self.default_database = default_database
        self.client: Optional[AsyncIOMotorClient] = None
        self.store: Optional[Store] = None

    async def connect(self) -> Store:
        """Create the client, ensure indexes and build the store."""
        self.client = AsyncIOMotorClient(self.url, tz_aware=True)
        database = self.client.get_default_database(default=self.default_database)
        logger.info(f"Connected to MongoDB database: {database.name}")

        # Exercises are always looked up by owner
        await database.exercises.create_index([("userId", ASCENDING)])

        self.store = Store(database)
        return self.store

    def close(self):
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            self.store = None
            logger.info("Disconnected from MongoDB")
