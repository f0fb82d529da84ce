"""Firestore access over the REST API: value codec, document client, query compiler."""

from folio.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    StoreConfig,
    TokenProvider,
)
from folio.infrastructure.firebase._rest_encoding import (
    ABSENT,
    ArrayValue,
    BooleanValue,
    Document,
    DoubleValue,
    FieldValue,
    IntegerValue,
    StringValue,
    TimestampValue,
    decode,
    encode,
)
from folio.infrastructure.firebase._rest_query import (
    ASCENDING,
    DESCENDING,
    FieldFilter,
    Order,
    QuerySpec,
)
from folio.infrastructure.firebase.client import create_firestore_client

__all__ = [
    "ABSENT",
    "ASCENDING",
    "ArrayValue",
    "BooleanValue",
    "DESCENDING",
    "Document",
    "DoubleValue",
    "FieldFilter",
    "FieldValue",
    "FirestoreRESTClient",
    "IntegerValue",
    "Order",
    "QuerySpec",
    "StoreConfig",
    "StringValue",
    "TimestampValue",
    "TokenProvider",
    "create_firestore_client",
    "decode",
    "encode",
]
