"""Key-value persistence for boards: one serialized value per board name."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlparse

import structlog
from bson.errors import BSONError
from pydantic import ValidationError as PydanticValidationError
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from discussboard.core.modules.discussion.models import Board
from discussboard.errors import StorageError

logger = structlog.get_logger(__name__)


class BoardStorage(ABC):
    """Durable store holding each board as one value under its own key."""

    @abstractmethod
    async def load_board(self, name: str) -> Board:
        """Load the board stored under `name`, or an empty board if there is none yet."""

    @abstractmethod
    async def save_board(self, board: Board) -> None:
        """Replace the stored value for `board.id` with the whole board."""

    async def close(self) -> None:
        """Release backend resources."""


class MemoryBoardStorage(BoardStorage):
    """Process-local storage keeping boards as serialized JSON blobs."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    async def load_board(self, name: str) -> Board:
        blob = self._blobs.get(name)
        if blob is None:
            return Board(id=name)
        try:
            return Board.model_validate_json(blob)
        except PydanticValidationError as e:
            raise StorageError(f"Board '{name}' is corrupt") from e

    async def save_board(self, board: Board) -> None:
        self._blobs[board.id] = board.model_dump_json().encode()


class MongoBoardStorage(BoardStorage):
    """MongoDB storage with one document per board in the `boards` collection."""

    def __init__(self, database_url: str) -> None:
        self._client: AsyncMongoClient[dict[str, Any]] = AsyncMongoClient(database_url)
        self._collection = self._client.get_database(urlparse(database_url).path[1:]).get_collection("boards")

    async def load_board(self, name: str) -> Board:
        try:
            doc = await self._collection.find_one({"_id": name})
        except (PyMongoError, BSONError) as e:
            raise StorageError(f"Failed to load board '{name}'") from e
        if doc is None:
            return Board(id=name)
        try:
            return Board.model_validate(doc)
        except PydanticValidationError as e:
            raise StorageError(f"Board '{name}' is corrupt") from e

    async def save_board(self, board: Board) -> None:
        try:
            await self._collection.replace_one({"_id": board.id}, board.to_mongo(), upsert=True)
        except (PyMongoError, BSONError) as e:
            raise StorageError(f"Failed to save board '{board.id}'") from e

    async def close(self) -> None:
        await self._client.aclose()


def create_storage(database_url: str) -> BoardStorage:
    """Pick a storage backend from the database URL scheme."""
    scheme = urlparse(database_url).scheme
    if scheme in ("mongodb", "mongodb+srv"):
        return MongoBoardStorage(database_url)
    if scheme == "memory":
        logger.warning("memory_storage_selected", detail="boards will not survive a restart")
        return MemoryBoardStorage()
    raise ValueError(f"Unsupported database URL scheme: '{scheme}'")
