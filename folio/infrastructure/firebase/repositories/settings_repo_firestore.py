"""Firestore-backed site settings (settings/global and settings/blog)."""

from __future__ import annotations

from typing import Any

from folio.application.dtos.settings import DEFAULT_FOOTER_TEXT, SiteSettingsResult
from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import (
    COLLECTION_SETTINGS,
    SETTINGS_BLOG_DOC,
    SETTINGS_GLOBAL_DOC,
)
from folio.infrastructure.firebase.repositories._values import as_str


class FirestoreSiteSettingsRepository:
    """Singleton settings documents. Both are created on first save."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    @staticmethod
    def _to_result(doc: Document) -> SiteSettingsResult:
        return SiteSettingsResult(
            resume_url=as_str(doc.get("resumeUrl")),
            contact_email=as_str(doc.get("contactEmail")),
            contact_phone=as_str(doc.get("contactPhone")),
            contact_location=as_str(doc.get("contactLocation")),
            footer_text=as_str(doc.get("footerText")) or DEFAULT_FOOTER_TEXT,
        )

    async def _upsert(
        self, doc_id: str, data: dict[str, Any], token: str | None
    ) -> Document:
        try:
            return await self._client.patch(
                COLLECTION_SETTINGS, doc_id, data, token=token
            )
        except DocumentNotFoundException:
            return await self._client.create(
                COLLECTION_SETTINGS, data, token=token, document_id=doc_id
            )

    async def get_global(self, token: str | None = None) -> SiteSettingsResult:
        """Return the site settings; defaults when they were never saved."""
        try:
            doc = await self._client.get(
                COLLECTION_SETTINGS, SETTINGS_GLOBAL_DOC, token=token
            )
        except DocumentNotFoundException:
            return SiteSettingsResult()
        return self._to_result(doc)

    async def save_global(
        self, settings: SiteSettingsResult, token: str | None = None
    ) -> SiteSettingsResult:
        """Write every settings field (admin)."""
        doc = await self._upsert(
            SETTINGS_GLOBAL_DOC,
            {
                "resumeUrl": settings.resume_url,
                "contactEmail": settings.contact_email,
                "contactPhone": settings.contact_phone,
                "contactLocation": settings.contact_location,
                "footerText": settings.footer_text,
            },
            token,
        )
        return self._to_result(doc)

    async def get_blog_announcement(self, token: str | None = None) -> str:
        """Return the banner shown above blog posts ("" when unset)."""
        try:
            doc = await self._client.get(
                COLLECTION_SETTINGS, SETTINGS_BLOG_DOC, token=token
            )
        except DocumentNotFoundException:
            return ""
        return as_str(doc.get("globalAnnouncement"))

    async def set_blog_announcement(
        self, text: str, token: str | None = None
    ) -> str:
        doc = await self._upsert(
            SETTINGS_BLOG_DOC, {"globalAnnouncement": text}, token
        )
        return as_str(doc.get("globalAnnouncement"))
