"""Firestore-backed visitor statistics (single stats/visitors document)."""

from __future__ import annotations

import logging

from folio.application.dtos.stats import VisitorStatsResult
from folio.domain.exceptions import DocumentExistsException, DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import COLLECTION_STATS, STATS_VISITORS_DOC
from folio.infrastructure.firebase.counters import as_int
from folio.infrastructure.firebase.repositories._values import as_str
from folio.shared.utils.datetime import utc_now_iso

logger = logging.getLogger(__name__)


class FirestoreVisitorStatsRepository:
    """Visit counters. Updates are read-then-write and may drop concurrent visits."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    @staticmethod
    def _to_result(doc: Document) -> VisitorStatsResult:
        return VisitorStatsResult(
            total_visits=as_int(doc.get("totalVisits")),
            guest_visits=as_int(doc.get("guestVisits")),
            user_visits=as_int(doc.get("userVisits")),
            last_updated=as_str(doc.get("lastUpdated")),
        )

    async def get_stats(self, token: str | None = None) -> VisitorStatsResult:
        """Return current counters; all zero before the first visit."""
        try:
            doc = await self._client.get(COLLECTION_STATS, STATS_VISITORS_DOC, token=token)
        except DocumentNotFoundException:
            return VisitorStatsResult(total_visits=0, guest_visits=0, user_visits=0)
        return self._to_result(doc)

    async def record_visit(
        self, is_user: bool, token: str | None = None
    ) -> VisitorStatsResult:
        """Count one visit (signed-in user or guest); creates the document on first visit."""
        now = utc_now_iso()
        try:
            current = await self._client.get(COLLECTION_STATS, STATS_VISITORS_DOC, token=token)
        except DocumentNotFoundException:
            try:
                doc = await self._client.create(
                    COLLECTION_STATS,
                    {
                        "totalVisits": 1,
                        "guestVisits": 0 if is_user else 1,
                        "userVisits": 1 if is_user else 0,
                        "lastUpdated": now,
                        "createdAt": now,
                    },
                    token=token,
                    document_id=STATS_VISITORS_DOC,
                )
                return self._to_result(doc)
            except DocumentExistsException:
                logger.debug("Visitor stats created concurrently; incrementing instead")
                current = await self._client.get(
                    COLLECTION_STATS, STATS_VISITORS_DOC, token=token
                )

        bucket = "userVisits" if is_user else "guestVisits"
        doc = await self._client.patch(
            COLLECTION_STATS,
            STATS_VISITORS_DOC,
            {
                "totalVisits": as_int(current.get("totalVisits")) + 1,
                bucket: as_int(current.get(bucket)) + 1,
                "lastUpdated": now,
            },
            token=token,
        )
        return self._to_result(doc)
