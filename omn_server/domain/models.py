"""Typed domain models shared across runtime layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassifiedResponse:
    """Externally visible outcome derived from one classified failure.

    Attributes:
        status_code: HTTP status code returned to the caller.
        body: Plain-text response body.
    """

    status_code: int
    body: str
