"""Application entry point for quicknotes server."""

from quicknotes.app import App
from quicknotes.config import Config
from quicknotes.logging import setup_logging
from quicknotes.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
