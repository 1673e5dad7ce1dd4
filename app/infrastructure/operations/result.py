"""Operation result dataclass.

Uniform result type returned from shell operations, including status,
data, and error information.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (e.g. the applied language)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @property
    def is_applied(self) -> bool:
        """True when the locale was applied, even if the content fragment failed."""
        return self.status in (OperationStatus.SUCCESS, OperationStatus.PARTIAL)

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
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a non-success OperationResult.

        Args:
            status: OperationStatus describing the outcome
            message: Human-friendly message
            error_code: Optional machine error code
            data: Optional payload to include with the result

        Returns:
            OperationResult with specified status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )
