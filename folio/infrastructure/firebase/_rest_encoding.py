"""Encode/decode Python values to/from Firestore REST API 'fields' format.

A field value is one of six frozen dataclasses (the FieldValue union). Native
values are mapped onto it with encode()/decode(); the JSON tagged form used
on the wire is produced by to_wire() and parsed by from_wire().
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from folio.domain.exceptions import ProtocolException

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True)
class IntegerValue:
    """64-bit integer; sent as a decimal string on the wire."""

    value: int


@dataclass(frozen=True)
class DoubleValue:
    value: float


@dataclass(frozen=True)
class TimestampValue:
    """RFC 3339 timestamp kept as the store's string; never parsed here."""

    value: str


@dataclass(frozen=True)
class ArrayValue:
    values: tuple[FieldValue, ...] = ()


FieldValue = Union[
    StringValue, BooleanValue, IntegerValue, DoubleValue, TimestampValue, ArrayValue
]

_FIELD_VALUE_TYPES = (
    StringValue,
    BooleanValue,
    IntegerValue,
    DoubleValue,
    TimestampValue,
    ArrayValue,
)

# Decoded value of a field the document does not have.
ABSENT = ""


def _fits_int64(n: int) -> bool:
    return _INT64_MIN <= n <= _INT64_MAX


def encode(v: Any) -> FieldValue:
    """Map a native value to a FieldValue.

    str, bool, int, float and list/tuple have exact encodings; a float that is
    mathematically integral becomes an IntegerValue. FieldValue instances pass
    through unchanged (use TimestampValue to write a timestamp). Anything else,
    including None and integers outside the 64-bit range, is stored as its
    string form.
    """
    if isinstance(v, _FIELD_VALUE_TYPES):
        return v
    if isinstance(v, str):
        return StringValue(v)
    if isinstance(v, bool):
        return BooleanValue(v)
    if isinstance(v, int):
        if _fits_int64(v):
            return IntegerValue(v)
        return StringValue(str(v))
    if isinstance(v, float):
        if v.is_integer() and _fits_int64(int(v)):
            return IntegerValue(int(v))
        return DoubleValue(v)
    if isinstance(v, (list, tuple)):
        return ArrayValue(tuple(encode(x) for x in v))
    if v is None:
        return StringValue("")
    return StringValue(str(v))


def decode(fv: FieldValue | None) -> Any:
    """Map a FieldValue back to a native value.

    None stands for a field the document does not have and decodes to ABSENT
    (empty string). BooleanValue(False) decodes to False, not ABSENT.
    """
    if fv is None:
        return ABSENT
    if isinstance(fv, ArrayValue):
        return [decode(x) for x in fv.values]
    if isinstance(fv, IntegerValue):
        return int(fv.value)
    if isinstance(fv, DoubleValue):
        return float(fv.value)
    if isinstance(fv, (StringValue, BooleanValue, TimestampValue)):
        return fv.value
    raise TypeError(f"Not a Firestore field value: {type(fv)}")


def _double_to_wire(value: float) -> float | str:
    # JSON has no NaN/Infinity literals; the store takes these string forms.
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def to_wire(fv: FieldValue) -> dict:
    """Return the JSON tagged form of a FieldValue."""
    if isinstance(fv, StringValue):
        return {"stringValue": fv.value}
    if isinstance(fv, BooleanValue):
        return {"booleanValue": fv.value}
    if isinstance(fv, IntegerValue):
        return {"integerValue": str(fv.value)}
    if isinstance(fv, DoubleValue):
        return {"doubleValue": _double_to_wire(fv.value)}
    if isinstance(fv, TimestampValue):
        return {"timestampValue": fv.value}
    if isinstance(fv, ArrayValue):
        return {"arrayValue": {"values": [to_wire(x) for x in fv.values]}}
    raise TypeError(f"Not a Firestore field value: {type(fv)}")


_WIRE_TAGS = frozenset({
    "stringValue",
    "booleanValue",
    "integerValue",
    "doubleValue",
    "timestampValue",
    "arrayValue",
})


def _parse_double(raw: Any, obj: dict) -> float:
    # NaN and the infinities arrive as the strings "NaN", "Infinity", "-Infinity".
    if isinstance(raw, bool):
        raise ProtocolException("doubleValue is not a number", obj)
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError as e:
            raise ProtocolException("doubleValue is not a number", obj) from e
    raise ProtocolException("doubleValue is not a number", obj)


def from_wire(obj: Any) -> FieldValue:
    """Parse a JSON tagged value into a FieldValue.

    Raises:
        ProtocolException: obj is not an object carrying exactly one supported
            tag, or the payload has the wrong JSON type.
    """
    if not isinstance(obj, dict):
        raise ProtocolException("Field value is not a JSON object", obj)
    tags = [k for k in obj if k in _WIRE_TAGS]
    if len(tags) != 1:
        unknown = sorted(k for k in obj if k not in _WIRE_TAGS)
        if not tags and unknown:
            raise ProtocolException(
                f"Unsupported field value type: {', '.join(unknown)}", obj
            )
        raise ProtocolException(
            f"Field value must carry exactly one type tag, found {len(tags)}", obj
        )
    tag = tags[0]
    raw = obj[tag]
    if tag == "stringValue":
        if not isinstance(raw, str):
            raise ProtocolException("stringValue is not a string", obj)
        return StringValue(raw)
    if tag == "booleanValue":
        if not isinstance(raw, bool):
            raise ProtocolException("booleanValue is not a boolean", obj)
        return BooleanValue(raw)
    if tag == "integerValue":
        if isinstance(raw, bool):
            raise ProtocolException("integerValue is not an integer", obj)
        try:
            return IntegerValue(int(raw))
        except (TypeError, ValueError) as e:
            raise ProtocolException("integerValue is not an integer", obj) from e
    if tag == "doubleValue":
        return DoubleValue(_parse_double(raw, obj))
    if tag == "timestampValue":
        if not isinstance(raw, str):
            raise ProtocolException("timestampValue is not a string", obj)
        return TimestampValue(raw)
    if not isinstance(raw, dict):
        raise ProtocolException("arrayValue is not an object", obj)
    vals = raw.get("values") or []
    if not isinstance(vals, list):
        raise ProtocolException("arrayValue.values is not a list", obj)
    return ArrayValue(tuple(from_wire(x) for x in vals))


def encode_fields(data: Mapping[str, Any]) -> dict[str, dict]:
    """Convert a Python mapping to the wire form of Document.fields."""
    return {k: to_wire(encode(v)) for k, v in data.items()}


def parse_fields(fields: Any) -> dict[str, FieldValue]:
    """Parse the wire form of Document.fields (absent or null means no fields)."""
    if not fields:
        return {}
    if not isinstance(fields, dict):
        raise ProtocolException("Document fields is not a JSON object", fields)
    return {k: from_wire(v) for k, v in fields.items()}


def decode_fields(fields: Mapping[str, FieldValue]) -> dict[str, Any]:
    """Convert parsed Document.fields to a plain Python dict."""
    return {k: decode(v) for k, v in fields.items()}


@dataclass(frozen=True)
class Document:
    """A Firestore document: resource name plus parsed fields.

    name is the full resource path
    (projects/{p}/databases/{d}/documents/{collection}/{id}); only its last
    segment is interpreted, as the document id.
    """

    name: str
    fields: dict[str, FieldValue]
    create_time: str | None = None
    update_time: str | None = None

    @property
    def id(self) -> str:
        return self.name.rsplit("/", 1)[-1] if self.name else ""

    def get(self, field: str) -> Any:
        """Decoded value of one field; ABSENT ("") when the document lacks it."""
        return decode(self.fields.get(field))

    def to_dict(self) -> dict[str, Any]:
        return decode_fields(self.fields)

    @classmethod
    def from_wire(cls, obj: Any) -> Document:
        """Parse a REST Document resource.

        Raises:
            ProtocolException: not an object, no name, or malformed fields.
        """
        if not isinstance(obj, dict):
            raise ProtocolException("Document is not a JSON object", obj)
        name = obj.get("name")
        if not isinstance(name, str) or not name:
            raise ProtocolException("Document has no resource name", obj)
        return cls(
            name=name,
            fields=parse_fields(obj.get("fields")),
            create_time=obj.get("createTime"),
            update_time=obj.get("updateTime"),
        )
