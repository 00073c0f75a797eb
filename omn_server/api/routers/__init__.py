"""API router package for endpoint composition."""

from .info import api_create_info_router
from .records import api_create_records_router

__all__ = ["api_create_info_router", "api_create_records_router"]
