"""Application entry point for the DiscussBoard server."""

from discussboard.app import App
from discussboard.config import Config
from discussboard.logging import setup_logging
from discussboard.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
