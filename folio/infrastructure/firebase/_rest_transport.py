"""Single HTTP exchange with the Firestore REST API.

Maps HTTP statuses and httpx failures onto the folio exception taxonomy.
No retries: one call, one request.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from folio.domain.exceptions import (
    DocumentExistsException,
    DocumentNotFoundException,
    PermissionDeniedException,
    TransportException,
)

logger = logging.getLogger(__name__)

QueryParams = list[tuple[str, str]]


def _store_message(resp: httpx.Response) -> str:
    """Return the store's error message ({"error": {"message": ...}}) or the reason phrase."""
    try:
        payload = resp.json()
    except ValueError:
        return resp.reason_phrase or f"HTTP {resp.status_code}"
    if isinstance(payload, list) and payload:
        payload = payload[0]
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return resp.reason_phrase or f"HTTP {resp.status_code}"


async def request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    path: str,
    params: QueryParams | None = None,
    body: dict | None = None,
    access_token: str | None = None,
) -> Any:
    """Perform one async HTTP request and return the decoded JSON body.

    Args:
        client: Shared httpx client (its timeout bounds the call).
        method: GET, POST, PATCH or DELETE.
        url: Absolute request URL without query string.
        path: Resource path used in error details (never includes the API key).
        params: Query parameters; repeated keys allowed.
        body: JSON body for POST/PATCH.
        access_token: Bearer token; omitted means unauthenticated.

    Returns:
        Parsed JSON (dict or list); {} for an empty body.

    Raises:
        DocumentNotFoundException: 404.
        PermissionDeniedException: 401 or 403.
        DocumentExistsException: 409.
        TransportException: other error statuses, network errors, timeouts,
            and bodies that are not JSON.
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method not in ("GET", "POST", "PATCH", "DELETE"):
        raise ValueError(f"Unsupported method: {method!r}")
    try:
        resp = await client.request(
            method, url, params=params, headers=headers, json=body
        )
    except httpx.TimeoutException as e:
        raise TransportException(f"Request timed out: {method} {path}", path) from e
    except httpx.HTTPError as e:
        raise TransportException(f"Request failed: {method} {path}: {e}", path) from e

    status = resp.status_code
    if status == 404:
        raise DocumentNotFoundException(path)
    if status in (401, 403):
        raise PermissionDeniedException(path, status, _store_message(resp))
    if status == 409:
        raise DocumentExistsException(path)
    if status >= 400:
        message = _store_message(resp)
        logger.warning("Firestore %s %s failed: %s %s", method, path, status, message)
        raise TransportException(
            f"Firestore returned {status}: {message}", path, status
        )
    raw = resp.content
    if not raw:
        return {}
    try:
        return json.loads(raw.decode())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TransportException(
            f"Response is not valid JSON: {method} {path}", path, status
        ) from e
