"""Coercions from decoded field values to read-model types.

Documents are schemaless: a field may be absent (decodes to ""), or written
with a different type by an older admin panel.
"""

from typing import Any


def as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    return str(value)


def as_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    return default


def as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [as_str(v) for v in value]
