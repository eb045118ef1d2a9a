"""Tests for application configuration."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from discussboard.config import Config


def make_config(**overrides) -> Config:
    values = {"database_url": "memory://", "host": "127.0.0.1", "port": 8000, "debug": False} | overrides
    return Config(**values)


class TestBoardName:
    """Tests for board name validation at startup."""

    def test_default(self):
        assert make_config().board_name == "discussion"

    def test_slug_accepted(self):
        assert make_config(board_name="my-board-2").board_name == "my-board-2"

    @pytest.mark.parametrize("name", ["", "Guest Book", "guest_book", "trailing-", "../etc"])
    def test_non_slug_rejected(self, name):
        with pytest.raises(PydanticValidationError, match="board_name must be a slug"):
            make_config(board_name=name)

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("DISCUSSBOARD_BOARD_NAME", "Not A Slug")

        with pytest.raises(PydanticValidationError):
            make_config()
