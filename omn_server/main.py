"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging

import uvicorn

from omn_server.bootstrap import bootstrap_create_application
from omn_server.config import (
    UVICORN_LOG_CONFIG,
    SettingsLoadError,
    config_configure_logging,
    config_load_settings,
)

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the HTTP service with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with code 1 when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="omn-server runtime entrypoint")
    argument_parser.add_argument(
        "--without-store",
        dest="without_store",
        action="store_true",
        help="Serve configuration only; `DB_URL` is not required and `/db` is not exposed",
    )
    parsed_arguments = argument_parser.parse_args()
    store_enabled = not parsed_arguments.without_store

    try:
        settings = config_load_settings(store_required=store_enabled)
    except SettingsLoadError as error:
        config_configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    application = bootstrap_create_application(settings=settings, store_enabled=store_enabled)
    logger.info("starting omn-server host=%s port=%s store_enabled=%s", settings.host, settings.port, store_enabled)
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_config=UVICORN_LOG_CONFIG,
    )


if __name__ == "__main__":
    main()
