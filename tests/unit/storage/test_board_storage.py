"""Tests for board storage backends."""

from unittest.mock import AsyncMock

import pytest
from bson.errors import InvalidBSON
from pymongo.errors import DocumentTooLarge, ServerSelectionTimeoutError

from discussboard.core.modules.discussion.models import Board, Entry, Reply
from discussboard.core.storage import MemoryBoardStorage, MongoBoardStorage, create_storage
from discussboard.errors import StorageError


def make_board() -> Board:
    entry = Entry(name="Alice", message="Hello", replies=[Reply(name="Bob", message="Hi")])
    return Board(id="guestbook", entries=[entry])


class TestMemoryStorage:
    """Tests for the in-process backend."""

    async def test_missing_board_is_empty(self):
        board = await MemoryBoardStorage().load_board("guestbook")

        assert board.id == "guestbook"
        assert board.entries == []
        assert not board.modified

    async def test_loaded_board_is_independent_copy(self):
        """Test that changes to a loaded board do not leak into storage until saved."""
        storage = MemoryBoardStorage()
        await storage.save_board(make_board())

        loaded = await storage.load_board("guestbook")
        loaded.add_entry(Entry(name="Carol", message="unsaved"))

        reloaded = await storage.load_board("guestbook")
        assert [e.name for e in reloaded.entries] == ["Alice"]
        assert reloaded.entries[0].replies[0].name == "Bob"

    async def test_corrupt_blob(self):
        storage = MemoryBoardStorage()
        storage._blobs["guestbook"] = b"{not json"

        with pytest.raises(StorageError):
            await storage.load_board("guestbook")


class TestMongoStorage:
    """Tests for the MongoDB backend against a mocked collection."""

    @pytest.fixture
    def storage(self):
        storage = MongoBoardStorage("mongodb://localhost:27017/discussboard_test")
        storage._collection = AsyncMock()
        return storage

    async def test_save_replaces_whole_document(self, storage):
        board = make_board()

        await storage.save_board(board)

        storage._collection.replace_one.assert_awaited_once()
        query, document = storage._collection.replace_one.await_args.args
        assert query == {"_id": "guestbook"}
        assert document["_id"] == "guestbook"
        assert document["entries"][0]["replies"][0]["name"] == "Bob"
        assert storage._collection.replace_one.await_args.kwargs == {"upsert": True}

    async def test_load_document(self, storage):
        expected = make_board()
        storage._collection.find_one.return_value = expected.to_mongo()

        board = await storage.load_board("guestbook")

        storage._collection.find_one.assert_awaited_once_with({"_id": "guestbook"})
        assert board == expected

    async def test_load_missing_document(self, storage):
        storage._collection.find_one.return_value = None

        board = await storage.load_board("guestbook")

        assert board.entries == []

    async def test_backend_failure(self, storage):
        storage._collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StorageError):
            await storage.load_board("guestbook")

    async def test_save_failure(self, storage):
        storage._collection.replace_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StorageError):
            await storage.save_board(make_board())

    async def test_undecodable_document(self, storage):
        """Test that a document the driver can't decode is reported as a storage failure."""
        storage._collection.find_one.side_effect = InvalidBSON("invalid utf-8")

        with pytest.raises(StorageError):
            await storage.load_board("guestbook")

    async def test_document_too_large(self, storage):
        storage._collection.replace_one.side_effect = DocumentTooLarge("BSON document too large")

        with pytest.raises(StorageError):
            await storage.save_board(make_board())

    async def test_corrupt_document(self, storage):
        storage._collection.find_one.return_value = {"_id": "guestbook", "entries": [{"name": "no message"}]}

        with pytest.raises(StorageError):
            await storage.load_board("guestbook")


class TestCreateStorage:
    """Tests for backend selection by URL scheme."""

    def test_memory(self):
        assert isinstance(create_storage("memory://"), MemoryBoardStorage)

    def test_mongodb(self):
        assert isinstance(create_storage("mongodb://localhost:27017/discussboard"), MongoBoardStorage)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError, match="Unsupported"):
            create_storage("redis://localhost")
