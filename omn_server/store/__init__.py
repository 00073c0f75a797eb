"""Record store package for the external data dependency boundary."""

from .errors import StoreAddressError, StoreConnectionError, StoreError, StoreQueryError
from .interfaces import RecordStorePort, StoreAddress, StoreConnection
from .simulated import (
    STORE_ADDRESS_SCHEME,
    SimulatedRecordStore,
    store_clock_availability_check,
    store_parse_address,
)

__all__ = [
    "RecordStorePort",
    "STORE_ADDRESS_SCHEME",
    "SimulatedRecordStore",
    "StoreAddress",
    "StoreAddressError",
    "StoreConnection",
    "StoreConnectionError",
    "StoreError",
    "StoreQueryError",
    "store_clock_availability_check",
    "store_parse_address",
]
