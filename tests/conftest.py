import logging

import pytest


@pytest.fixture(autouse=True)
def reset_api_doc_meta_logger():
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    yield
    logger = logging.getLogger("api_doc_meta")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
