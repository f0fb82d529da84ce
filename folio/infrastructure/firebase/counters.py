"""Client-side counters (views, likes, shares, comment counts, visits).

increment_field reads the document, adds delta in Python, and patches back
only the counter field. This is NOT atomic: two callers that read the same
value both write value + delta and one increment is lost. The REST layer
offers no compare-and-swap, so callers that need exact counts must not use
this helper.
"""

from __future__ import annotations

import logging
from typing import Any

from folio.infrastructure.firebase._rest_client import FirestoreRESTClient

logger = logging.getLogger(__name__)


def as_int(value: Any, default: int = 0) -> int:
    """Coerce a decoded counter to int; absent ("") or junk values give default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


async def increment_field(
    client: FirestoreRESTClient,
    collection: str,
    doc_id: str,
    field: str,
    delta: int = 1,
    token: str | None = None,
) -> int:
    """Read-then-write increment of one numeric field; returns the new value.

    Raises:
        DocumentNotFoundException: the document does not exist.
    """
    doc = await client.get(collection, doc_id, token=token)
    new_value = as_int(doc.get(field)) + delta
    await client.patch(collection, doc_id, {field: new_value}, token=token)
    logger.debug("%s/%s.%s -> %d", collection, doc_id, field, new_value)
    return new_value
