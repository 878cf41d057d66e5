"""
Object utilities for JSON serialization.

Provides a tolerant JSON encoder used to build compact, stable text
payloads (for example the invoice summary sent to Gemini).
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses by converting them to dictionaries first.
    Falls back to str() for non-serializable objects.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation with sorted keys.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent, sort_keys=True)


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Handles common types that aren't JSON serializable by default.
    """
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
