"""Tests for domain exceptions (error_code, message, details)."""

from hradmin.domain.exceptions import (
    AdminAlreadyExistsException,
    AuthenticationException,
    HRAdminException,
    ResourceNotFoundException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base HRAdminException uses class name as error_code when not provided."""
    exc = HRAdminException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "HRAdminException"
    assert exc.details == {}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = HRAdminException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="end_date")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "end_date"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Invalid").details == {}


def test_authentication_exception() -> None:
    """AuthenticationException sets AUTHENTICATION_ERROR and default message."""
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("employee", "e1")
    assert exc.message == "employee not found: e1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "employee", "resource_id": "e1"}


def test_admin_already_exists_exception() -> None:
    exc = AdminAlreadyExistsException("9000000001")
    assert exc.error_code == "ADMIN_ALREADY_EXISTS"
    assert exc.details == {"mobile": "9000000001"}
