"""Tests for domain exceptions (error_code, message, details)."""

from folio.domain.exceptions import (
    DocumentExistsException,
    DocumentNotFoundException,
    FolioException,
    PermissionDeniedException,
    ProtocolException,
    TransportException,
    ValidationException,
)


def test_folio_exception_default_error_code() -> None:
    """Base FolioException uses class name as error_code when not provided."""
    exc = FolioException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FolioException"
    assert exc.details == {}


def test_folio_exception_custom_error_code_and_details() -> None:
    exc = FolioException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_validation_exception() -> None:
    exc = ValidationException("patch requires at least one field", field="data")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "data"}


def test_document_not_found_exception() -> None:
    exc = DocumentNotFoundException("profiles/u1")
    assert exc.message == "Document not found: profiles/u1"
    assert exc.error_code == "NOT_FOUND"
    assert exc.details == {"path": "profiles/u1"}


def test_document_exists_exception() -> None:
    exc = DocumentExistsException("stats/visitors")
    assert exc.error_code == "DOCUMENT_EXISTS"
    assert exc.details == {"path": "stats/visitors"}


def test_permission_denied_exception() -> None:
    exc = PermissionDeniedException("users/u1", 403, "Missing or insufficient permissions.")
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.message == "Missing or insufficient permissions."
    assert exc.details == {"path": "users/u1", "status_code": 403}


def test_transport_exception_details_only_when_known() -> None:
    assert TransportException("boom").details == {}
    exc = TransportException("Firestore returned 500", "projects", 500)
    assert exc.error_code == "TRANSPORT_ERROR"
    assert exc.details == {"path": "projects", "status_code": 500}


def test_protocol_exception_keeps_payload() -> None:
    exc = ProtocolException("Document has no resource name", {"fields": {}})
    assert exc.error_code == "PROTOCOL_ERROR"
    assert exc.details == {"payload": {"fields": {}}}


def test_all_inherit_from_folio_exception() -> None:
    for exc in (
        ValidationException("x"),
        DocumentNotFoundException("a/b"),
        DocumentExistsException("a/b"),
        PermissionDeniedException("a/b", 401),
        TransportException("x"),
        ProtocolException("x"),
    ):
        assert isinstance(exc, FolioException)
