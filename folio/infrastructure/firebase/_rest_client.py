"""Thin Firestore REST API client (no firebase-admin, no google-cloud-firestore).

CRUD on collection/document endpoints plus structured queries via runQuery.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Every call is a single request/response exchange: there is no cache, no
retry, no transaction and no compare-and-swap, so concurrent writes to the
same document are last-write-wins at the store.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from folio.core.config import Settings
from folio.domain.exceptions import (
    DocumentNotFoundException,
    ProtocolException,
    ValidationException,
)
from folio.infrastructure.firebase._rest_encoding import Document, encode_fields
from folio.infrastructure.firebase._rest_query import (
    QuerySpec,
    compile_structured_query,
    normalize_run_query_response,
)
from folio.infrastructure.firebase._rest_transport import QueryParams, request
from folio.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

_BASE = "https://firestore.googleapis.com/v1"
_SIMPLE_FIELD_PATH = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

TokenProvider = Callable[[], Awaitable[str | None]]


@dataclass(frozen=True)
class StoreConfig:
    """Which Firestore database to talk to, and how."""

    project_id: str
    api_key: str
    database_id: str = "(default)"
    base_url: str = _BASE
    timeout_seconds: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> StoreConfig:
        return cls(
            project_id=settings.firebase_project_id,
            api_key=settings.firebase_api_key.get_secret_value(),
            database_id=settings.firebase_database_id,
            base_url=settings.firestore_base_url.rstrip("/"),
            timeout_seconds=settings.firestore_timeout_seconds,
        )

    @property
    def documents_path(self) -> str:
        return f"projects/{self.project_id}/databases/{self.database_id}/documents"

    @property
    def documents_url(self) -> str:
        return f"{self.base_url}/{self.documents_path}"


def _mask_field_path(key: str) -> str:
    """Quote a top-level key for updateMask.fieldPaths (backticks unless a plain identifier)."""
    if _SIMPLE_FIELD_PATH.match(key):
        return key
    escaped = key.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


class FirestoreRESTClient:
    """Lightweight Firestore client using the REST API.

    Token rule per call: an explicit token argument wins, else the optional
    token_provider is awaited, else the request is unauthenticated. The client
    never stores or refreshes tokens.
    """

    def __init__(
        self,
        config: StoreConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        token_provider: TokenProvider | None = None,
    ) -> None:
        self._config = config
        self._token_provider = token_provider
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(timeout=config.timeout_seconds)
        )
        self._owns_http = http_client is None

    @property
    def config(self) -> StoreConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> FirestoreRESTClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _resolve_token(self, token: str | None) -> str | None:
        if token:
            return token
        if self._token_provider is not None:
            return await self._token_provider()
        return None

    def _params(self, *extra: tuple[str, str]) -> QueryParams:
        return [("key", self._config.api_key), *extra]

    def _collection_url(self, collection: str) -> str:
        return f"{self._config.documents_url}/{collection}"

    def _document_url(self, collection: str, doc_id: str) -> str:
        return f"{self._collection_url(collection)}/{quote(doc_id, safe='')}"

    async def _call(
        self,
        method: str,
        url: str,
        path: str,
        *,
        params: QueryParams,
        body: dict | None = None,
        token: str | None = None,
    ) -> Any:
        logger.debug("Firestore %s %s", method, path)
        add_span_attributes(**{"firestore.path": path, "http.method": method})
        return await request(
            self._http,
            method,
            url,
            path=path,
            params=params,
            body=body,
            access_token=await self._resolve_token(token),
        )

    @traced("firestore.get")
    async def get(self, collection: str, doc_id: str, token: str | None = None) -> Document:
        """Fetch one document.

        Raises:
            DocumentNotFoundException: the document does not exist.
            PermissionDeniedException: the security rules reject the caller.
            TransportException: network/HTTP failure.
        """
        path = f"{collection}/{doc_id}"
        out = await self._call(
            "GET", self._document_url(collection, doc_id), path,
            params=self._params(), token=token,
        )
        return Document.from_wire(out)

    @traced("firestore.list")
    async def list(
        self,
        collection: str,
        order_by: str | None = None,
        limit: int | None = None,
        token: str | None = None,
    ) -> list[Document]:
        """List documents in a collection (shallow).

        order_by is the REST orderBy string (e.g. "createdAt desc"). With a
        limit a single page of that size is fetched; without one, pages are
        followed until the collection is exhausted. An empty collection (no
        "documents" key) yields [].

        Raises:
            ValidationException: limit is given but below 1.
        """
        if limit is not None and limit < 1:
            raise ValidationException("limit must be at least 1", "limit")
        url = self._collection_url(collection)
        base: list[tuple[str, str]] = []
        if order_by:
            base.append(("orderBy", order_by))
        if limit is not None:
            base.append(("pageSize", str(limit)))

        docs: list[Document] = []
        page_token: str | None = None
        while True:
            extra = list(base)
            if page_token:
                extra.append(("pageToken", page_token))
            out = await self._call(
                "GET", url, collection, params=self._params(*extra), token=token
            )
            if not isinstance(out, dict):
                raise ProtocolException("List response is not a JSON object", out)
            docs.extend(Document.from_wire(d) for d in out.get("documents") or [])
            page_token = out.get("nextPageToken")
            if limit is not None or not page_token:
                break
        return docs

    @traced("firestore.create")
    async def create(
        self,
        collection: str,
        data: Mapping[str, Any],
        token: str | None = None,
        document_id: str | None = None,
    ) -> Document:
        """Create a document; the store generates its id unless document_id is given.

        Raises:
            DocumentExistsException: document_id is taken (HTTP 409).
        """
        extra: list[tuple[str, str]] = []
        path = collection
        if document_id is not None:
            extra.append(("documentId", document_id))
            path = f"{collection}/{document_id}"
        out = await self._call(
            "POST", self._collection_url(collection), path,
            params=self._params(*extra),
            body={"fields": encode_fields(data)},
            token=token,
        )
        doc = Document.from_wire(out)
        logger.debug("Created %s/%s", collection, doc.id)
        return doc

    @traced("firestore.patch")
    async def patch(
        self,
        collection: str,
        doc_id: str,
        data: Mapping[str, Any],
        token: str | None = None,
    ) -> Document:
        """Update exactly the top-level keys of data; other fields are untouched.

        The update mask lists one path per key, and the document must already
        exist (no upsert).

        Raises:
            ValidationException: data is empty (an empty mask would replace
                the whole document).
            DocumentNotFoundException: the document does not exist.
        """
        if not data:
            raise ValidationException("patch requires at least one field", "data")
        mask = [("updateMask.fieldPaths", _mask_field_path(k)) for k in data]
        out = await self._call(
            "PATCH", self._document_url(collection, doc_id), f"{collection}/{doc_id}",
            params=self._params(*mask, ("currentDocument.exists", "true")),
            body={"fields": encode_fields(data)},
            token=token,
        )
        return Document.from_wire(out)

    @traced("firestore.delete")
    async def delete(
        self,
        collection: str,
        doc_id: str,
        token: str | None = None,
        must_exist: bool = False,
    ) -> None:
        """Delete a document.

        By default deleting a missing document is a success (a 404 is logged,
        not raised). With must_exist=True the store checks existence and
        DocumentNotFoundException propagates.
        """
        path = f"{collection}/{doc_id}"
        extra = [("currentDocument.exists", "true")] if must_exist else []
        try:
            await self._call(
                "DELETE", self._document_url(collection, doc_id), path,
                params=self._params(*extra), token=token,
            )
        except DocumentNotFoundException:
            if must_exist:
                raise
            logger.debug("Delete of missing document %s treated as success", path)

    @traced("firestore.query")
    async def query(
        self,
        collection: str,
        spec: QuerySpec,
        token: str | None = None,
    ) -> list[Document]:
        """Run a structured query; returns the same list[Document] shape as list()."""
        body = {"structuredQuery": compile_structured_query(collection, spec)}
        out = await self._call(
            "POST", f"{self._config.documents_url}:runQuery", f"{collection}:runQuery",
            params=self._params(), body=body, token=token,
        )
        return normalize_run_query_response(out)
