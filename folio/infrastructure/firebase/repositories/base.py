"""Generic CRUD over one Firestore collection for simple admin-managed content."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.shared.utils.datetime import utc_now_iso

ResultType = TypeVar("ResultType")


class FirestoreCollectionRepository(Generic[ResultType]):
    """Base repository with list_all, get_by_id, update and delete.

    Subclasses set collection (and optionally order_by, the REST orderBy
    string used by list_all) and implement _to_result. Typed create methods
    live on the subclasses and go through _create.
    """

    collection: str
    order_by: str | None = None

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> ResultType:
        raise NotImplementedError

    async def list_all(self, token: str | None = None) -> list[ResultType]:
        """Return every document in the collection, in order_by order."""
        docs = await self._client.list(
            self.collection, order_by=self.order_by, token=token
        )
        return [self._to_result(d) for d in docs]

    async def get_by_id(
        self, entity_id: str, token: str | None = None
    ) -> ResultType | None:
        """Return a single document by ID, or None."""
        try:
            doc = await self._client.get(self.collection, entity_id, token=token)
        except DocumentNotFoundException:
            return None
        return self._to_result(doc)

    async def _create(
        self, data: dict[str, Any], token: str | None = None
    ) -> ResultType:
        doc = await self._client.create(
            self.collection, {**data, "createdAt": utc_now_iso()}, token=token
        )
        return self._to_result(doc)

    async def update(
        self, entity_id: str, changes: dict[str, Any], token: str | None = None
    ) -> ResultType:
        """Patch the given document fields (camelCase keys) and stamp updatedAt.

        Raises:
            DocumentNotFoundException: the document does not exist.
        """
        doc = await self._client.patch(
            self.collection,
            entity_id,
            {**changes, "updatedAt": utc_now_iso()},
            token=token,
        )
        return self._to_result(doc)

    async def delete(self, entity_id: str, token: str | None = None) -> None:
        await self._client.delete(self.collection, entity_id, token=token)
