"""
Custom Exceptions for College Match

Hierarchical exception classes for proper error handling across layers.
"""

from typing import Optional, Dict, Any, List


class CollegeMatchError(Exception):
    """Base exception for all College Match errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(CollegeMatchError):
    """Raised when input validation fails."""
    pass


class AuthError(CollegeMatchError):
    """Raised when the caller identity is missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid or missing credentials",
        original_error: Optional[Exception] = None
    ):
        super().__init__(message, original_error=original_error)


class DatabaseError(CollegeMatchError):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, details, original_error)


class NotFoundError(DatabaseError):
    """Raised when a requested resource is not found."""
    pass


class ProfileNotFoundError(NotFoundError):
    """Raised when the caller has no student profile."""

    def __init__(self, user_id: str):
        super().__init__(
            f"No profile found for user {user_id}",
            operation="get_by_user_id",
            table="user_profiles",
        )
        self.user_id = user_id


class CatalogFetchError(DatabaseError):
    """Raised when the college catalog cannot be loaded."""

    def __init__(
        self,
        message: str = "College catalog is unavailable",
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            operation="list_all",
            table="colleges",
            original_error=original_error,
        )


class PersistenceError(DatabaseError):
    """
    Raised when storing recommendations fails.

    Names the college(s) whose write failed.
    """

    def __init__(
        self,
        failed_college_ids: List[str],
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            "Failed to save recommendations for college(s): "
            + ", ".join(failed_college_ids),
            operation="upsert",
            table="recommendations",
            original_error=original_error,
        )
        self.failed_college_ids = list(failed_college_ids)
        self.details["failed_college_ids"] = self.failed_college_ids


class ConfigurationError(CollegeMatchError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
