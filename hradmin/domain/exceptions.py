"""Domain exceptions for hradmin.

Raised by repositories and services; the API layer turns them into JSON
error responses (see hradmin.core.exception_handlers). Fetch errors from
Firestore itself are not wrapped: they propagate as httpx errors.
"""

from typing import Any


class HRAdminException(Exception):
    """Base class for errors the API reports to the admin panel.

    Attributes:
        message: Text shown to the admin.
        error_code: Stable machine-readable code; the handler maps it to an HTTP status.
        details: Extra context such as the offending field or resource id.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error, message, details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(HRAdminException):
    """Input that passed schema validation but breaks a business rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else {})


class AuthenticationException(HRAdminException):
    """Bad credentials, or a missing, invalid or expired token."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(HRAdminException):
    """No document with this id in the resource's collection."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """
        Args:
            resource_type: 'employee', 'employment', ...
            resource_id: Firestore document id that was looked up.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AdminAlreadyExistsException(HRAdminException):
    """An admin with this mobile number is already registered."""

    def __init__(self, mobile: str) -> None:
        super().__init__(
            f"Admin with mobile '{mobile}' already exists",
            "ADMIN_ALREADY_EXISTS",
            {"mobile": mobile},
        )
