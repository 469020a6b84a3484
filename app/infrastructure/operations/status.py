"""Operation status enumeration.

Status codes used to classify the outcome of a geolocation lookup so callers
can decide whether to retry, report a bad request, or treat the address as
unknown.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Lookup completed and produced location data
        TRANSIENT_ERROR: Retryable error (database file missing, reader failure)
        PERMANENT_ERROR: Non-retryable error (malformed IP address)
        NOT_FOUND: Address is valid but absent from the database
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
