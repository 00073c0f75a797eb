"""Process-wide logging setup.

The service owns the root handler. uvicorn is started without its own logging
config, so its loggers are stripped of handlers and propagate here; request
access lines stay at INFO regardless of the service log level.
"""

import logging
import sys
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Passed to `uvicorn.run(log_config=...)`; None keeps uvicorn off dictConfig.
UVICORN_LOG_CONFIG: Final[None] = None
UVICORN_LOGGER_NAMES: Final[tuple[str, ...]] = ("uvicorn", "uvicorn.error", "uvicorn.access")


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging and route uvicorn records through it.

    Args:
        level: Service log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        None: Logging is configured as a side effect.
    """

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for logger_name in UVICORN_LOGGER_NAMES:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
