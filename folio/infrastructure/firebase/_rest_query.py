"""Compile filter/order/limit specs into Firestore structuredQuery JSON.

runQuery answers with a list of wrappers, one per result slot; a wrapper
without a "document" key carries only a readTime (this is how an empty
result looks). normalize_run_query_response flattens that into the same
list[Document] shape the plain list endpoint returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from folio.domain.exceptions import ProtocolException
from folio.infrastructure.firebase._rest_encoding import Document, encode, to_wire

# Shorthands accepted for operators; any other string is sent to the store verbatim.
_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
    "array_contains_any": "ARRAY_CONTAINS_ANY",
    "array-contains-any": "ARRAY_CONTAINS_ANY",
}

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"


@dataclass(frozen=True)
class FieldFilter:
    field: str
    op: str
    value: Any


@dataclass(frozen=True)
class Order:
    field: str
    direction: str = ASCENDING


@dataclass
class QuerySpec:
    """Declarative query: filters (ANDed), sort keys and optional limit.

    where and order_by also accept plain tuples, (field, op, value) and
    (field, direction) respectively.
    """

    where: list[FieldFilter | tuple] = field(default_factory=list)
    order_by: list[Order | tuple] = field(default_factory=list)
    limit: int | None = None


def _as_filter(f: FieldFilter | tuple) -> FieldFilter:
    return f if isinstance(f, FieldFilter) else FieldFilter(*f)


def _as_order(o: Order | tuple | str) -> Order:
    if isinstance(o, Order):
        return o
    if isinstance(o, str):
        return Order(o)
    return Order(*o)


def _field_filter(f: FieldFilter) -> dict:
    return {
        "fieldFilter": {
            "field": {"fieldPath": f.field},
            "op": _OP_MAP.get(f.op, f.op),
            "value": to_wire(encode(f.value)),
        }
    }


def compile_structured_query(collection: str, spec: QuerySpec) -> dict[str, Any]:
    """Build the structuredQuery object for a collection query.

    No filters omits "where"; one filter is a bare fieldFilter; two or more
    are wrapped in a compositeFilter with op AND.
    """
    structured: dict[str, Any] = {
        "from": [{"collectionId": collection}],
    }
    filters = [_field_filter(_as_filter(f)) for f in spec.where]
    if len(filters) == 1:
        structured["where"] = filters[0]
    elif filters:
        structured["where"] = {"compositeFilter": {"op": "AND", "filters": filters}}
    if spec.order_by:
        structured["orderBy"] = [
            {"field": {"fieldPath": o.field}, "direction": o.direction}
            for o in map(_as_order, spec.order_by)
        ]
    if spec.limit is not None:
        structured["limit"] = spec.limit
    return structured


def normalize_run_query_response(payload: Any) -> list[Document]:
    """Return the documents of a runQuery response, in order, skipping empty wrappers.

    Raises:
        ProtocolException: payload is not a list of objects, or a document
            does not parse.
    """
    if not isinstance(payload, list):
        raise ProtocolException("runQuery response is not a list", payload)
    docs: list[Document] = []
    for item in payload:
        if not isinstance(item, dict):
            raise ProtocolException("runQuery result is not a JSON object", item)
        if item.get("document") is None:
            continue
        docs.append(Document.from_wire(item["document"]))
    return docs
