"""Firestore-backed contact form inbox."""

from __future__ import annotations

from folio.application.dtos.contact import ContactMessageResult
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import COLLECTION_CONTACTS
from folio.infrastructure.firebase.repositories._values import as_bool, as_str
from folio.infrastructure.firebase.repositories.base import (
    FirestoreCollectionRepository,
)


class FirestoreContactRepository(FirestoreCollectionRepository[ContactMessageResult]):
    """Anyone may submit a message; reading and flagging need an admin token."""

    collection = COLLECTION_CONTACTS

    def _to_result(self, doc: Document) -> ContactMessageResult:
        return ContactMessageResult(
            id=doc.id,
            name=as_str(doc.get("name")),
            email=as_str(doc.get("email")),
            subject=as_str(doc.get("subject")),
            message=as_str(doc.get("message")),
            status=as_str(doc.get("status")),
            created_at=as_str(doc.get("createdAt")),
            is_read=as_bool(doc.get("isRead")),
            is_starred=as_bool(doc.get("isStarred")),
        )

    async def submit(
        self,
        *,
        name: str,
        email: str,
        subject: str,
        message: str,
        token: str | None = None,
    ) -> ContactMessageResult:
        """Store a message from the contact form as unread."""
        return await self._create(
            {
                "name": name,
                "email": email,
                "subject": subject,
                "message": message,
                "status": "unread",
            },
            token=token,
        )

    async def mark_read(
        self, message_id: str, is_read: bool = True, token: str | None = None
    ) -> ContactMessageResult:
        doc = await self._client.patch(
            self.collection, message_id, {"isRead": is_read}, token=token
        )
        return self._to_result(doc)

    async def set_starred(
        self, message_id: str, is_starred: bool, token: str | None = None
    ) -> ContactMessageResult:
        doc = await self._client.patch(
            self.collection, message_id, {"isStarred": is_starred}, token=token
        )
        return self._to_result(doc)
