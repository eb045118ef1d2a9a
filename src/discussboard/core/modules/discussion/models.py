from uuid import uuid4

from pydantic import BaseModel, Field, PrivateAttr

from discussboard.core.db import MongoModel
from discussboard.utils import now_ms


def new_id() -> str:
    """Random 128-bit identifier rendered as text."""
    return str(uuid4())


class Reply(BaseModel):
    """Response attached to exactly one entry."""

    id: str = Field(default_factory=new_id, description="Opaque unique identifier")
    name: str = Field(..., description="Author display name")
    message: str = Field(..., description="Message text")
    timestamp: int = Field(default_factory=now_ms, description="Creation time, milliseconds since epoch")


class Entry(Reply):
    """Top-level post with its replies, oldest reply first."""

    replies: list[Reply] = Field(default_factory=list, description="Replies in arrival order")

    def get_reply(self, reply_id: str) -> Reply | None:
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None


class Board(MongoModel):
    """All entries of one named board, newest entry first.

    Persisted as a single document keyed by the board name. Mutations only ever
    insert or remove whole entries and replies; `modified` records whether this
    snapshot needs to be written back.
    """

    entries: list[Entry] = Field(default_factory=list)
    _modified: bool = PrivateAttr(default=False)

    @property
    def modified(self) -> bool:
        return self._modified

    def get_entry(self, entry_id: str) -> Entry | None:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def add_entry(self, entry: Entry) -> None:
        self.entries.insert(0, entry)
        self._modified = True

    def add_reply(self, entry: Entry, reply: Reply) -> None:
        entry.replies.append(reply)
        self._modified = True

    def remove_entry(self, entry_id: str) -> bool:
        """Remove an entry with all its replies. Returns False if there was nothing to remove."""
        entry = self.get_entry(entry_id)
        if entry is None:
            return False
        self.entries.remove(entry)
        self._modified = True
        return True

    def remove_reply(self, entry: Entry, reply_id: str) -> bool:
        reply = entry.get_reply(reply_id)
        if reply is None:
            return False
        entry.replies.remove(reply)
        self._modified = True
        return True
