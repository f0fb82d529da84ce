"""Domain exceptions for the folio content store.

Every failure of the Firestore access layer is raised as one of these.
Transport-level problems (HTTP status, timeouts, unreadable bodies) are
normalized here so callers never see raw httpx errors.
"""

from typing import Any


class FolioException(Exception):
    """Base exception for all folio errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collection, document_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(FolioException):
    """Raised when caller input cannot be sent to the store (e.g. empty patch)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or argument that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class DocumentNotFoundException(FolioException):
    """Raised when the store reports no such document (HTTP 404).

    Often a legitimate branch for callers ("profile not yet created").
    """

    def __init__(self, path: str) -> None:
        """Initialize with the resource path that was not found.

        Args:
            path: Document path relative to the database (collection/id).
        """
        super().__init__(
            f"Document not found: {path}",
            "NOT_FOUND",
            {"path": path},
        )


class DocumentExistsException(FolioException):
    """Raised when creating a document whose ID already exists (HTTP 409)."""

    def __init__(self, path: str) -> None:
        """Initialize with the conflicting resource path.

        Args:
            path: Document or collection path of the failed create.
        """
        super().__init__(
            f"Document already exists: {path}",
            "DOCUMENT_EXISTS",
            {"path": path},
        )


class PermissionDeniedException(FolioException):
    """Raised when the store rejects the credentials (HTTP 401/403)."""

    def __init__(self, path: str, status_code: int, message: str = "Permission denied") -> None:
        """Initialize with path, HTTP status and store message.

        Args:
            path: Resource path that was denied.
            status_code: 401 (missing/invalid token) or 403.
            message: Message reported by the store, if any.
        """
        super().__init__(
            message,
            "PERMISSION_DENIED",
            {"path": path, "status_code": status_code},
        )


class TransportException(FolioException):
    """Raised on network failure, timeout, unexpected HTTP status or unreadable body."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize with message and optional path and HTTP status.

        Args:
            message: Description of the failure.
            path: Resource path of the failed request, if known.
            status_code: HTTP status when the store answered with an error.
        """
        details: dict[str, Any] = {}
        if path:
            details["path"] = path
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, "TRANSPORT_ERROR", details)


class ProtocolException(FolioException):
    """Raised when a response does not have the expected document or value shape."""

    def __init__(self, message: str, payload: Any = None) -> None:
        """Initialize with message and the offending fragment.

        Args:
            message: What was expected and not found.
            payload: The JSON fragment that failed to parse (kept for debugging).
        """
        details = {"payload": payload} if payload is not None else {}
        super().__init__(message, "PROTOCOL_ERROR", details)
