"""Closed failure taxonomy for every error the service surfaces to callers."""

from __future__ import annotations

from enum import Enum


class DomainErrorKind(str, Enum):
    """Failure kinds known to the classification boundary."""

    CONNECTION_FAILURE = "connection_failure"
    INVALID_ADDRESS = "invalid_address"
    QUERY_FAILURE = "query_failure"
    UNLUCKY = "unlucky"


class ServiceError(Exception):
    """Base exception for failures that reach the classification boundary.

    Attributes:
        error_kind: Taxonomy member used to select the response policy.
    """

    error_kind: DomainErrorKind


class UnluckyError(ServiceError):
    """Handler-level failure unrelated to the record store."""

    error_kind = DomainErrorKind.UNLUCKY

    def __init__(self, message: str = "Very Unlucky!"):
        super().__init__(message)
