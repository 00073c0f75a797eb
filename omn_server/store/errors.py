"""Project-native typed exceptions for record store failures."""

from __future__ import annotations

from omn_server.domain import DomainErrorKind, ServiceError


class StoreError(ServiceError):
    """Base exception for failures originating in the record store."""


class StoreConnectionError(StoreError, ConnectionError):
    """Store could not be reached while opening a connection."""

    error_kind = DomainErrorKind.CONNECTION_FAILURE

    def __init__(self, message: str = "Unable to connect to database"):
        super().__init__(message)


class StoreAddressError(StoreError, ValueError):
    """Raw store address failed scheme validation.

    Attributes:
        raw_address: Address string exactly as supplied by configuration.
    """

    error_kind = DomainErrorKind.INVALID_ADDRESS

    def __init__(self, raw_address: str):
        super().__init__(f"Invalid db url: `{raw_address}`")
        self.raw_address = raw_address


class StoreQueryError(StoreError, RuntimeError):
    """Query execution failed on an open connection."""

    error_kind = DomainErrorKind.QUERY_FAILURE

    def __init__(self, message: str = "Failed to execute query."):
        super().__init__(message)
