"""Typed interfaces for record store responsibilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class StoreAddress:
    """Validated store address.

    Attributes:
        raw: Address string that passed scheme validation.
    """

    raw: str


@dataclass(frozen=True)
class StoreConnection:
    """Opaque handle for one live store link, discarded after a single query.

    Attributes:
        address: Address the connection was opened against.
    """

    address: StoreAddress


class RecordStorePort(Protocol):
    """Port definition for the external record store."""

    def store_connect(self, raw_address: str) -> StoreConnection:
        """Open one connection to the store at the given raw address.

        Args:
            raw_address: Unvalidated store address from configuration.

        Returns:
            StoreConnection: Handle for exactly one query.

        Raises:
            StoreAddressError: Raised when the address is malformed.
            StoreConnectionError: Raised when the store is unreachable.
        """

    def store_run_query(
        self,
        connection: StoreConnection,
        query_text: str,
        result_factory: Callable[[], ResultT],
    ) -> ResultT:
        """Run one query and decode its result into the requested type.

        Args:
            connection: Open store connection.
            query_text: Backend-specific query text.
            result_factory: Callable producing the requested result type.

        Returns:
            ResultT: Decoded query result.

        Raises:
            StoreQueryError: Raised when query execution fails.
        """
