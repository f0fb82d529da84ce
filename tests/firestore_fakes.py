"""In-memory stand-in for the Firestore REST endpoint (httpx.MockTransport handler)."""

import json

import httpx

PROJECT_ID = "demo-project"
API_KEY = "test-api-key"
DOCS_PREFIX = f"projects/{PROJECT_ID}/databases/(default)/documents"
DOCS_PATH = f"/v1/{DOCS_PREFIX}"


def doc_name(collection: str, doc_id: str) -> str:
    """Full resource name as the store returns it."""
    return f"{DOCS_PREFIX}/{collection}/{doc_id}"


def wire_doc(collection: str, doc_id: str, fields: dict | None = None) -> dict:
    return {"name": doc_name(collection, doc_id), "fields": fields or {}}


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content.decode()) if request.content else {}


class FakeFirestore:
    """Records requests and answers them from a queue of (status, payload) pairs.

    A payload that is an Exception is raised from the transport instead.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[tuple[int, object]] = []

    def respond(self, status: int, payload: object = None) -> "FakeFirestore":
        self._responses.append((status, payload))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        status, payload = self._responses.pop(0)
        if isinstance(payload, Exception):
            raise payload
        if payload is None:
            return httpx.Response(status)
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
