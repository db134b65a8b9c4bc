"""Loggers for the resolver, the loaders and the CLI.

Every module logs under ``api_doc_meta.<name>``. The resolver reports which
source supplied each value at DEBUG, so ``resolve -v`` explains its output.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "api_doc_meta"


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[api-doc-meta] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
