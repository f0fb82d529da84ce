"""Firestore-backed testimonial (review) repository."""

from __future__ import annotations

from folio.application.dtos.testimonial import TestimonialResult
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase._rest_query import DESCENDING, FieldFilter, Order, QuerySpec
from folio.infrastructure.firebase.collections import COLLECTION_TESTIMONIALS
from folio.infrastructure.firebase.counters import as_int
from folio.infrastructure.firebase.repositories._values import as_bool, as_str
from folio.shared.utils.datetime import utc_now_iso


class FirestoreTestimonialRepository:
    """Visitor testimonials; new ones stay hidden until an admin approves them."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> TestimonialResult:
        return TestimonialResult(
            id=doc.id,
            user_id=as_str(doc.get("userId")),
            user_display_name=as_str(doc.get("userDisplayName")),
            content=as_str(doc.get("content")),
            rating=as_int(doc.get("rating")),
            is_visible=as_bool(doc.get("isVisible")),
            created_at=as_str(doc.get("createdAt")),
            user_location=as_str(doc.get("userLocation")),
        )

    async def list_visible(self, token: str | None = None) -> list[TestimonialResult]:
        """Return approved testimonials, newest first."""
        docs = await self._client.query(
            COLLECTION_TESTIMONIALS,
            QuerySpec(
                where=[FieldFilter("isVisible", "EQUAL", True)],
                order_by=[Order("createdAt", DESCENDING)],
            ),
            token=token,
        )
        return [self._to_result(d) for d in docs]

    async def submit(
        self,
        *,
        user_id: str,
        user_display_name: str,
        content: str,
        rating: int,
        user_location: str = "",
        token: str | None = None,
    ) -> TestimonialResult:
        """Store a new testimonial (hidden)."""
        now = utc_now_iso()
        doc = await self._client.create(
            COLLECTION_TESTIMONIALS,
            {
                "userId": user_id,
                "userDisplayName": user_display_name,
                "userLocation": user_location,
                "content": content,
                "rating": rating,
                "date": now,
                "isVisible": False,
                "createdAt": now,
            },
            token=token,
        )
        return self._to_result(doc)

    async def set_visibility(
        self, testimonial_id: str, visible: bool, token: str | None = None
    ) -> TestimonialResult:
        """Show or hide a testimonial (admin)."""
        doc = await self._client.patch(
            COLLECTION_TESTIMONIALS, testimonial_id, {"isVisible": visible}, token=token
        )
        return self._to_result(doc)
