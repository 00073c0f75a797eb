"""API layer package for FastAPI application and route composition."""

from .application import create_api_application
from .error_handlers import api_classify_error, api_register_error_handlers

__all__ = ["api_classify_error", "api_register_error_handlers", "create_api_application"]
