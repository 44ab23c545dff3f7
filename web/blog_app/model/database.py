"""
Database Model - Connection-per-request access to MongoDB
"""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from bson.errors import InvalidDocument
from pymongo import MongoClient
from pymongo.database import Database as MongoDatabase
from pymongo.errors import PyMongoError

from ..errors import DatabaseError

logger = logging.getLogger(__name__)


class Database:
    """Opens a fresh MongoDB connection for every operation and always releases it"""

    def __init__(self, connection_string: str = "mongodb://localhost:27017",
                 database_name: str = "my-blog"):
        self.connection_string = connection_string
        self.database_name = database_name

    @contextmanager
    def connect(self) -> Iterator[MongoDatabase]:
        """Yield a database handle; the client is closed on every exit path"""
        client = MongoClient(self.connection_string, serverSelectionTimeoutMS=5000)
        logger.debug(f"Opened MongoDB connection to {self.database_name}")
        try:
            yield client[self.database_name]
        finally:
            client.close()
            logger.debug(f"Closed MongoDB connection to {self.database_name}")

    def with_db(self, operation: Callable[[MongoDatabase], Any]) -> Any:
        """
        Run an operation against an open database handle.

        Args:
            operation: Function receiving the database handle

        Returns:
            Whatever the operation returns

        Raises:
            DatabaseError: If connecting or the operation itself fails
        """
        try:
            with self.connect() as db:
                return operation(db)
        except (PyMongoError, InvalidDocument, OverflowError) as e:
            # OverflowError: ints beyond 64 bits cannot be BSON-encoded
            logger.error(f"MongoDB operation failed: {e}")
            raise DatabaseError(str(e)) from e
