"""Lookup failures raised by the aggregator.

Every failure is terminal: nothing here carries retry state.
"""

from enum import Enum

from .sources import SubResource


class FailurePolicy(str, Enum):
    STRICT = "strict"    # any failed sub-fetch fails the lookup
    DEGRADE = "degrade"  # failed panels are reported per panel


class AggregateError(Exception):
    """A lookup that produced no usable result."""

    def __init__(self, identifier: str, message: str, *,
                 status_code: int | None = None,
                 resource: SubResource | None = None):
        super().__init__(message)
        self.identifier = identifier
        self.message = message
        self.status_code = status_code
        self.resource = resource


class ValidationError(AggregateError):
    """Identifier missing or blank; raised before any request is sent."""


class NotFoundError(AggregateError):
    """The profile lookup reported that the identifier does not exist."""


class UpstreamFailure(AggregateError):
    """A sub-resource failed: network error, timeout or non-2xx status."""
