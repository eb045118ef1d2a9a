from pydantic import field_validator
from pydantic_settings import BaseSettings

from discussboard.utils import is_slug


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # mongodb://host:port/dbname or memory://
    host: str
    port: int
    debug: bool
    admin_password: str = ""  # Shared secret for deletions; empty disables deletion
    board_name: str = "discussion"  # The single board addressed by the HTTP API
    cors_origins: list[str] = []
    list_fail_open: bool = True  # Return an empty list instead of an error when the board can't be read
    max_name_length: int = 100
    max_message_length: int = 2000
    # Build metadata injected during Docker build via environment variables
    git_commit_hash: str = "unknown"  # Git commit hash at build time (for debugging deployments)
    git_commit_date: str = "unknown"  # Git commit date at build time (for tracking release timeline)
    build_time: str = "unknown"  # Docker image build timestamp (for identifying exact build)

    model_config = {
        "env_file": [".env"],
        "env_prefix": "DISCUSSBOARD_",
        "extra": "ignore",
    }

    @field_validator("board_name")
    @classmethod
    def validate_board_name(cls, value: str) -> str:
        if not is_slug(value):
            raise ValueError(f"board_name must be a slug, got '{value}'")
        return value
