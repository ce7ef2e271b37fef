"""Document store adapter for the users and exercises collections."""

from typing import Any, Dict, List, Mapping, Optional, Type

from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from pydantic import BaseModel, ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from schemas.exercise import Exercise
from schemas.user import User
from utils.exceptions import StoreError
from utils.logger import setup_logger

logger = setup_logger(__name__)


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert the ObjectId of a MongoDB document to a string."""
    document = dict(document)
    if "_id" in document:
        document["_id"] = str(document["_id"])
    return document


class Collection:
    """A MongoDB collection whose inserts are validated against ``schema``."""

    def __init__(self, collection: Any, schema: Type[BaseModel]):
        self.collection = collection
        self.schema = schema

    @property
    def name(self) -> str:
        return getattr(self.collection, "name", self.schema.__name__.lower())

    async def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert a new record; the store assigns its ``_id``."""
        try:
            document = self.schema(**fields).model_dump()
        except PydanticValidationError as e:
            raise StoreError(f"{self.schema.__name__} validation failed: {e}") from e

        try:
            result = await self.collection.insert_one(document)
        except (PyMongoError, InvalidDocument, OverflowError) as e:
            logger.error(f"Error inserting into {self.name}: {e}", exc_info=True)
            raise StoreError(f"Error inserting into {self.name}: {e}") from e

        document["_id"] = result.inserted_id
        logger.info(f"Created {self.name} record {result.inserted_id}")
        return serialize_document(document)

    async def find_all(self, filter: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Return every matching record in the store's natural order."""
        try:
            cursor = self.collection.find(dict(filter or {}))
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error querying {self.name}: {e}", exc_info=True)
            raise StoreError(f"Error querying {self.name}: {e}") from e
        return [serialize_document(document) for document in documents]

    async def find_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Return the record with ``record_id``, or None when absent.

        Raises StoreError when ``record_id`` is not a valid ObjectId.
        """
        try:
            object_id = ObjectId(record_id)
        except (InvalidId, TypeError) as e:
            raise StoreError(f"Cast to ObjectId failed for value {record_id!r}") from e

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Error reading {self.name} {record_id}: {e}", exc_info=True)
            raise StoreError(f"Error reading {self.name} {record_id}: {e}") from e

        if document is None:
            return None
        return serialize_document(document)


class Store:
    """The collections the API works with."""

    def __init__(self, database: Any):
        self.users = Collection(database.users, User)
        self.exercises = Collection(database.exercises, Exercise)
