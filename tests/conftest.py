"""Shared pytest fixtures."""

from collections.abc import AsyncGenerator

import pytest

from discussboard.config import Config
from discussboard.core.core import Core
from discussboard.core.storage import MemoryBoardStorage

ADMIN_PASSWORD = "s3cret-admin"


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def config() -> Config:
    """Create a test configuration backed by in-memory storage."""
    return Config(
        database_url="memory://",
        host="127.0.0.1",
        port=8000,
        debug=True,
        admin_password=ADMIN_PASSWORD,
        board_name="guestbook",
    )


@pytest.fixture
def storage() -> MemoryBoardStorage:
    return MemoryBoardStorage()


@pytest.fixture
async def core(config, storage) -> AsyncGenerator[Core]:
    """Started core whose board workers are drained after the test."""
    core = Core(config, storage)
    async with core.lifespan():
        yield core


@pytest.fixture
def discussion(core):
    return core.services.discussion
