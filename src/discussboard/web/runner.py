"""Uvicorn server runner for the DiscussBoard API."""

import copy
from typing import Any
from urllib.parse import urlparse

import structlog
import uvicorn
from uvicorn.config import LOGGING_CONFIG

from discussboard.app import App
from discussboard.config import Config
from discussboard.web.server import create_fastapi_app

logger = structlog.get_logger(__name__)


def build_log_config(debug: bool) -> dict[str, Any]:
    """Uvicorn logging config with compact formats, leaving uvicorn's defaults untouched."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"
    level = "DEBUG" if debug else "INFO"
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        log_config["loggers"].setdefault(name, {})["level"] = level
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    logger.info(
        "server_starting",
        host=config.host,
        port=config.port,
        board=config.board_name,
        storage=urlparse(config.database_url).scheme,
    )
    uvicorn.run(fastapi_app, host=config.host, port=config.port, log_config=build_log_config(config.debug), access_log=True)
