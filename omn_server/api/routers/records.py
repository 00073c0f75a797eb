"""Record fetch router backed by the record store port."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from omn_server.config import AppSettings
from omn_server.store import RecordStorePort

RECORDS_QUERY_TEXT = "give me some numbers"


def api_create_records_router(settings: AppSettings, record_store: RecordStorePort) -> APIRouter:
    """Create router fetching records from the configured store.

    Args:
        settings: Immutable runtime settings carrying the store address.
        record_store: Store port used for connect and query.

    Returns:
        APIRouter: Router exposing `/db` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if settings.db_url is None:
        raise ValueError("settings.db_url must be set to expose records")
    if record_store is None:
        raise ValueError("record_store must not be None")

    store_address = settings.db_url
    router = APIRouter(tags=["records"])

    @router.get("/db")
    def api_records_fetch() -> JSONResponse:
        """Fetch one batch of integer records.

        Returns:
            JSONResponse: `{"data": [...]}` payload.

        Raises:
            StoreError: Raised when connect or query fails; classified by the error handlers.
        """

        connection = record_store.store_connect(store_address)
        records: list[int] = record_store.store_run_query(connection, RECORDS_QUERY_TEXT, list)
        return JSONResponse(content={"data": records}, status_code=status.HTTP_200_OK)

    return router
