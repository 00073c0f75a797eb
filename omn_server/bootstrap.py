"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from omn_server.api import create_api_application
from omn_server.config import AppSettings
from omn_server.store import SimulatedRecordStore


def bootstrap_create_application(settings: AppSettings, store_enabled: bool = True) -> FastAPI:
    """Assemble the runtime application from already validated settings.

    Args:
        settings: Validated runtime settings.
        store_enabled: Whether to wire the simulated store and expose `/db`.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when the store is enabled without a configured address.
    """

    record_store = SimulatedRecordStore() if store_enabled else None
    return create_api_application(settings=settings, record_store=record_store)
