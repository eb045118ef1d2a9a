import structlog

from discussboard.core.core import Service
from discussboard.core.modules.discussion.models import Board, Entry, Reply
from discussboard.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def _require_text(name: str, message: str) -> tuple[str, str]:
    """Return trimmed author name and message, rejecting blank values."""
    name, message = name.strip(), message.strip()
    if not name:
        raise ValidationError("Name cannot be empty")
    if not message:
        raise ValidationError("Message cannot be empty")
    return name, message


class DiscussionService(Service):
    """Owns board entries and replies; every call runs on the board's serialization point."""

    async def list_entries(self, board_name: str) -> list[Entry]:
        """Get all entries, newest first, each with its replies oldest first."""

        def read(board: Board) -> list[Entry]:
            return board.entries

        return await self.core.services.board.get_instance(board_name).execute(read)

    async def post_entry(self, board_name: str, name: str, message: str) -> Entry:
        """Create an entry at the front of the board."""
        name, message = _require_text(name, message)

        def insert(board: Board) -> Entry:
            entry = Entry(name=name, message=message)
            board.add_entry(entry)
            return entry

        entry = await self.core.services.board.get_instance(board_name).execute(insert)
        logger.info("entry_posted", board=board_name, entry_id=entry.id)
        return entry

    async def post_reply(self, board_name: str, entry_id: str, name: str, message: str) -> Reply:
        """Append a reply to an existing entry."""
        name, message = _require_text(name, message)

        def append(board: Board) -> Reply:
            entry = board.get_entry(entry_id)
            if entry is None:
                raise NotFoundError(f"Entry '{entry_id}' not found")
            reply = Reply(name=name, message=message)
            board.add_reply(entry, reply)
            return reply

        reply = await self.core.services.board.get_instance(board_name).execute(append)
        logger.info("reply_posted", board=board_name, entry_id=entry_id, reply_id=reply.id)
        return reply

    async def delete_entry(self, board_name: str, entry_id: str) -> None:
        """Delete an entry and its replies. Deleting an unknown entry is a no-op."""

        def remove(board: Board) -> bool:
            return board.remove_entry(entry_id)

        removed = await self.core.services.board.get_instance(board_name).execute(remove)
        logger.info("entry_deleted", board=board_name, entry_id=entry_id, removed=removed)

    async def delete_reply(self, board_name: str, entry_id: str, reply_id: str) -> None:
        """Delete a reply from an existing entry. Deleting an unknown reply is a no-op."""

        def remove(board: Board) -> bool:
            entry = board.get_entry(entry_id)
            if entry is None:
                raise NotFoundError(f"Entry '{entry_id}' not found")
            return board.remove_reply(entry, reply_id)

        removed = await self.core.services.board.get_instance(board_name).execute(remove)
        logger.info("reply_deleted", board=board_name, entry_id=entry_id, reply_id=reply_id, removed=removed)
