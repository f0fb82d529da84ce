"""Domain layer: exceptions shared by the access layer and its callers.

No dependencies on infrastructure. Callers map these to user-visible
behavior.
"""

from folio.domain.exceptions import (
    DocumentExistsException,
    DocumentNotFoundException,
    FolioException,
    PermissionDeniedException,
    ProtocolException,
    TransportException,
    ValidationException,
)

__all__ = [
    "DocumentExistsException",
    "DocumentNotFoundException",
    "FolioException",
    "PermissionDeniedException",
    "ProtocolException",
    "TransportException",
    "ValidationException",
]
