"""Operation result dataclass.

Uniform result type returned by the MaxMind client and the Smart IP service,
carrying status, payload and error information instead of raising.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from lookups.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- location payload on success
        error_code: Optional[str] -- machine error code (e.g. IP_NOT_FOUND)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with specified error status
        """
        return cls(status=status, message=message, error_code=error_code)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a transient (retryable) error result.

        Use when the lookup may succeed later, such as a GeoIP database file
        that is being refreshed or a reader that failed to open.
        """
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use for input that will never resolve, such as a malformed IP address.
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND result for addresses absent from the database."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)
