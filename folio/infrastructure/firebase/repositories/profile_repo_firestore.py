"""Firestore-backed user profile repository (one document per user ID)."""

from __future__ import annotations

from typing import Any

from folio.application.dtos.profile import ProfileResult
from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import COLLECTION_PROFILES
from folio.infrastructure.firebase.repositories._values import as_str
from folio.shared.utils.datetime import utc_now_iso


class FirestoreProfileRepository:
    """Profiles keyed by auth user ID. A missing profile is normal (not yet created)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> ProfileResult:
        return ProfileResult(
            user_id=doc.id,
            display_name=as_str(doc.get("displayName")),
            bio=as_str(doc.get("bio")),
            location=as_str(doc.get("location")),
            phone=as_str(doc.get("phone")),
            website=as_str(doc.get("website")),
            photo_url=as_str(doc.get("photoURL")),
        )

    async def get_profile(
        self, user_id: str, token: str | None = None
    ) -> ProfileResult | None:
        """Return the user's profile, or None if they have not saved one yet."""
        try:
            doc = await self._client.get(COLLECTION_PROFILES, user_id, token=token)
        except DocumentNotFoundException:
            return None
        return self._to_result(doc)

    async def save_profile(
        self, user_id: str, changes: dict[str, Any], token: str | None = None
    ) -> ProfileResult:
        """Patch the profile fields in changes; create the profile on first save."""
        data = {**changes, "updatedAt": utc_now_iso()}
        try:
            doc = await self._client.patch(COLLECTION_PROFILES, user_id, data, token=token)
        except DocumentNotFoundException:
            doc = await self._client.create(
                COLLECTION_PROFILES,
                {**data, "createdAt": data["updatedAt"]},
                token=token,
                document_id=user_id,
            )
        return self._to_result(doc)
