"""Domain models and error taxonomy shared across runtime layers."""

from .errors import DomainErrorKind, ServiceError, UnluckyError
from .models import ClassifiedResponse

__all__ = ["ClassifiedResponse", "DomainErrorKind", "ServiceError", "UnluckyError"]
