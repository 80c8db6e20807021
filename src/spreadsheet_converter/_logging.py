"""Logging helpers for the spreadsheet_converter package."""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "spreadsheet_converter"
_HANDLER_ATTACHED = False


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the package root logger, once.

    Later calls only adjust the level. Library code never calls this; it is
    meant for applications and the command line.
    """
    global _HANDLER_ATTACHED

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if not _HANDLER_ATTACHED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)
        _HANDLER_ATTACHED = True

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger scoped under ``spreadsheet_converter``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
