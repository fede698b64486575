"""Logging setup for application entry points."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging with the standard format.

    Only entry points (the API lifespan and the demo CLI) should call this.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
