"""Configuration description router."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from omn_server.config import AppSettings

DESCRIBED_SETTINGS_FIELDS = {"host", "port", "db_url"}


def api_create_info_router(settings: AppSettings) -> APIRouter:
    """Create router describing the loaded runtime settings.

    Args:
        settings: Immutable runtime settings shared by all handlers.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/")
    def api_info_describe_settings() -> JSONResponse:
        """Return the loaded settings as JSON.

        Returns:
            JSONResponse: Bind address and store address; the store address is omitted when unset.
        """

        payload = settings.model_dump(include=DESCRIBED_SETTINGS_FIELDS, exclude_none=True)
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
