"""FastAPI application factory for the service."""

from fastapi import FastAPI

from omn_server.config import AppSettings
from omn_server.store import RecordStorePort

from .error_handlers import api_register_error_handlers
from .routers import api_create_info_router, api_create_records_router


def create_api_application(
    settings: AppSettings,
    record_store: RecordStorePort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated, immutable settings shared by every handler.
        record_store: Optional store port; `/db` is registered only when provided.

    Returns:
        FastAPI: Application with routes and error handlers registered.

    Raises:
        ValueError: Raised when a store is provided without a configured address.
    """

    application = FastAPI(title="omn-server")
    api_register_error_handlers(application)
    application.include_router(api_create_info_router(settings=settings))
    if record_store is not None:
        application.include_router(api_create_records_router(settings=settings, record_store=record_store))
    return application
