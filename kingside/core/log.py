"""Logging setup. Modules only ever do `logger = logging.getLogger(__name__)`; the entrypoint calls configure_logging once."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
