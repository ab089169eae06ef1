# File: review_api/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Basic stdout logging for the API process.

    Safe to call more than once; handlers already installed on the root
    logger (e.g. by uvicorn or pytest) are left alone.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
