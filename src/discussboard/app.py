from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

import structlog

from discussboard.config import Config
from discussboard.core.core import Core
from discussboard.core.modules.discussion.models import Entry, Reply
from discussboard.core.storage import BoardStorage
from discussboard.errors import NotFoundError, StorageError, ValidationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for the HTTP surface: addresses the configured board and checks the admin gate before delegating to Core."""

    def __init__(self, config: Config, storage: BoardStorage | None = None) -> None:
        self._core = Core(config, storage)

    @property
    def board_name(self) -> str:
        return self._core.config.board_name

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def list_entries(self) -> list[Entry]:
        """Get all entries, falling back to an empty list if the board can't be read and fail-open is enabled."""
        try:
            return await self._core.services.discussion.list_entries(self.board_name)
        except StorageError:
            if not self._core.config.list_fail_open:
                raise
            logger.warning("list_entries_failed_open", board=self.board_name, exc_info=True)
            return []

    async def post_entry(self, name: str, message: str) -> Entry:
        """Create a new top-level entry."""
        self._check_lengths(name, message)
        return await self._core.services.discussion.post_entry(self.board_name, name, message)

    async def post_reply(self, entry_id: str, name: str, message: str) -> Reply:
        """Reply to an existing entry."""
        self._check_lengths(name, message)
        return await self._core.services.discussion.post_reply(self.board_name, entry_id, name, message)

    async def delete_entry(self, admin_password: str | None, entry_id: str) -> None:
        """Delete an entry with its replies (admin only)."""
        self._core.services.access.ensure_admin(admin_password)
        await self._core.services.discussion.delete_entry(self.board_name, entry_id)

    async def delete_reply(self, admin_password: str | None, entry_id: str, reply_id: str) -> None:
        """Delete a single reply (admin only). A reply whose entry is already gone counts as deleted."""
        self._core.services.access.ensure_admin(admin_password)
        try:
            await self._core.services.discussion.delete_reply(self.board_name, entry_id, reply_id)
        except NotFoundError:
            logger.info("reply_delete_entry_missing", board=self.board_name, entry_id=entry_id, reply_id=reply_id)

    def get_version(self) -> dict[str, str]:
        """Get package version and build metadata."""
        try:
            package_version = version("discussboard")
        except PackageNotFoundError:
            package_version = "unknown"
        config = self._core.config
        return {
            "version": package_version,
            "git_commit_hash": config.git_commit_hash,
            "git_commit_date": config.git_commit_date,
            "build_time": config.build_time,
        }

    def _check_lengths(self, name: str, message: str) -> None:
        config = self._core.config
        if len(name) > config.max_name_length:
            raise ValidationError(f"Name must be at most {config.max_name_length} characters")
        if len(message) > config.max_message_length:
            raise ValidationError(f"Message must be at most {config.max_message_length} characters")
