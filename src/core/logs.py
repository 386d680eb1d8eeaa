"""Logging setup for the `catalog` logger hierarchy."""

import logging

LOGGER_NAME = "catalog"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the top-level application logger.

    Calling it again only adjusts the level, no duplicate handlers are attached.
    Child loggers (``catalog.api``, ``catalog.store`` ...) propagate here.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{area}")
