import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | None = None):
    """
    Routes the service, the client CLI and uvicorn through one JSON handler.

    Safe to call from every module at import time: each call replaces the
    handlers instead of stacking new ones. The upload service logs at
    ``LOG_LEVEL`` (default ``INFO``); the ``cdn-upload`` command defaults
    to ``WARNING`` so its stdout stays the stored file name.

    Args:
        level: Log level name, overriding ``LOG_LEVEL``. Unknown names
            fall back to ``INFO``.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(log_level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
