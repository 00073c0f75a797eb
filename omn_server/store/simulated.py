"""Simulated record store that stands in for an unreliable external database."""

from __future__ import annotations

import logging
import time
from typing import Callable, Final

from .errors import StoreAddressError, StoreConnectionError
from .interfaces import RecordStorePort, ResultT, StoreAddress, StoreConnection

logger = logging.getLogger(__name__)

STORE_ADDRESS_SCHEME: Final[str] = "db://"


def store_parse_address(raw_address: str) -> StoreAddress:
    """Validate a raw store address against the required scheme prefix.

    Args:
        raw_address: Unvalidated address string.

    Returns:
        StoreAddress: Validated address wrapper.

    Raises:
        StoreAddressError: Raised when the address lacks the `db://` prefix.
    """

    if not raw_address.startswith(STORE_ADDRESS_SCHEME):
        raise StoreAddressError(raw_address)
    return StoreAddress(raw=raw_address)


def store_clock_availability_check() -> bool:
    """Report the store as unavailable during every third wall-clock second.

    Returns:
        bool: True when the store accepts connections.
    """

    return int(time.time()) % 3 != 0


class SimulatedRecordStore(RecordStorePort):
    """Record store stand-in with address validation and intermittent outages."""

    def __init__(self, availability_check: Callable[[], bool] = store_clock_availability_check):
        """Initialize simulated record store.

        Args:
            availability_check: Decision function returning True when the store is reachable.

        Raises:
            ValueError: Raised when availability_check is None.
        """

        if availability_check is None:
            raise ValueError("availability_check must not be None")
        self._availability_check = availability_check

    def store_connect(self, raw_address: str) -> StoreConnection:
        """Open one simulated connection.

        Args:
            raw_address: Unvalidated store address from configuration.

        Returns:
            StoreConnection: Fresh connection handle.

        Raises:
            StoreAddressError: Raised when the address is malformed.
            StoreConnectionError: Raised when the availability check reports an outage.
        """

        address = store_parse_address(raw_address)
        if not self._availability_check():
            raise StoreConnectionError()
        logger.debug("store connection opened address=%s", address.raw)
        return StoreConnection(address=address)

    def store_run_query(
        self,
        connection: StoreConnection,
        query_text: str,
        result_factory: Callable[[], ResultT],
    ) -> ResultT:
        """Return the default value of the requested result type.

        Args:
            connection: Open store connection.
            query_text: Query text; not interpreted by the simulation.
            result_factory: Callable producing the requested result type.

        Returns:
            ResultT: `result_factory()`.

        Raises:
            StoreQueryError: Declared by the port; the simulation never raises it.
        """

        _ = (connection, query_text)
        return result_factory()
