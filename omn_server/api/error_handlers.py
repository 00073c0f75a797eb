"""Classification boundary mapping service failures to HTTP responses.

Store failures collapse into one generic server error and are logged for
operators. Handler-level failures pass their own text through to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from omn_server.domain import ClassifiedResponse, DomainErrorKind, ServiceError

logger = logging.getLogger(__name__)

GENERIC_STORE_FAILURE_BODY: Final[str] = "Some kind of DB problem."


@dataclass(frozen=True)
class ErrorClassificationPolicy:
    """Response policy for one failure kind.

    Attributes:
        status_code: HTTP status returned for the kind.
        generic_body: Fixed body text, or None to pass the error text through.
        operator_logged: Whether the internal detail is recorded in the log.
    """

    status_code: int
    generic_body: str | None
    operator_logged: bool


ERROR_CLASSIFICATION_POLICIES: Final[dict[DomainErrorKind, ErrorClassificationPolicy]] = {
    DomainErrorKind.CONNECTION_FAILURE: ErrorClassificationPolicy(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        generic_body=GENERIC_STORE_FAILURE_BODY,
        operator_logged=True,
    ),
    DomainErrorKind.INVALID_ADDRESS: ErrorClassificationPolicy(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        generic_body=GENERIC_STORE_FAILURE_BODY,
        operator_logged=True,
    ),
    DomainErrorKind.QUERY_FAILURE: ErrorClassificationPolicy(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        generic_body=GENERIC_STORE_FAILURE_BODY,
        operator_logged=True,
    ),
    DomainErrorKind.UNLUCKY: ErrorClassificationPolicy(
        status_code=status.HTTP_451_UNAVAILABLE_FOR_LEGAL_REASONS,
        generic_body=None,
        operator_logged=False,
    ),
}


def api_classify_error(error: ServiceError) -> ClassifiedResponse:
    """Map one service failure to its externally visible response.

    Args:
        error: Failure raised below the API layer.

    Returns:
        ClassifiedResponse: Status code and body for the caller.

    Raises:
        KeyError: Raised when the error kind has no registered policy.
    """

    policy = ERROR_CLASSIFICATION_POLICIES[error.error_kind]
    body = policy.generic_body if policy.generic_body is not None else str(error)
    return ClassifiedResponse(status_code=policy.status_code, body=body)


def api_record_error(error: ServiceError) -> None:
    """Write internal failure detail to the operator log when the policy asks for it.

    Args:
        error: Failure raised below the API layer.

    Returns:
        None: Logging is a side effect.
    """

    if ERROR_CLASSIFICATION_POLICIES[error.error_kind].operator_logged:
        logger.error("store failure kind=%s detail=%s", error.error_kind.value, error)


def api_register_error_handlers(application: FastAPI) -> None:
    """Register the service failure handler on the application.

    Args:
        application: FastAPI application instance.

    Returns:
        None: Handlers are registered as a side effect.
    """

    @application.exception_handler(ServiceError)
    async def api_handle_service_error(_request: Request, error: ServiceError) -> PlainTextResponse:
        api_record_error(error)
        classified_response = api_classify_error(error)
        return PlainTextResponse(content=classified_response.body, status_code=classified_response.status_code)
