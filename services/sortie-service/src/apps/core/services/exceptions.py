# services/sortie-service/src/apps/core/services/exceptions.py
"""
Sortie Service Exceptions

Custom exceptions for sortie service operations.
"""

from typing import Optional, Dict, Any


class SortieServiceError(Exception):
    """Base exception for sortie service errors."""

    def __init__(
        self,
        message: str,
        code: str = "SORTIE_SERVICE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class SortieNotFoundError(SortieServiceError):
    """Raised when a sortie is not found."""

    def __init__(
        self,
        sortie_id: str = None,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Sortie not found: {sortie_id}"
        super().__init__(
            message=msg,
            code="SORTIE_NOT_FOUND",
            details=details or {"sortie_id": sortie_id}
        )


class SortieValidationError(SortieServiceError):
    """Raised when submitted sortie data is rejected before any write."""

    def __init__(
        self,
        message: str,
        field: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code="SORTIE_VALIDATION_ERROR",
            details=error_details
        )


class SortieConflictError(SortieServiceError):
    """Raised when the database rejects a write on an integrity constraint."""

    def __init__(
        self,
        reason: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        error_details["reason"] = reason
        super().__init__(
            message=message or "Sortie conflicts with existing data",
            code="SORTIE_CONFLICT",
            details=error_details
        )


class SortieCreationError(SortieServiceError):
    """Raised when a sortie could not be created for any other database reason."""

    def __init__(
        self,
        reason: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        error_details["reason"] = reason
        super().__init__(
            message=message or "Failed to create sortie",
            code="SORTIE_CREATION_FAILED",
            details=error_details
        )


class StoreUnavailableError(SortieServiceError):
    """Raised when the database is unreachable or a lock wait timed out."""

    def __init__(
        self,
        reason: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        error_details.update({
            "reason": reason,
            "retryable": True,
        })
        super().__init__(
            message=message or "Sortie store is temporarily unavailable",
            code="STORE_UNAVAILABLE",
            details=error_details
        )
