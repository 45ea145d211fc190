"""
Tolerant access to parsed Overpass JSON

Every read checks presence and type first and returns None instead of
raising, so one malformed element never aborts a whole response.
"""

import json
import math
from typing import Any, Iterator, Optional

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON constant: {token}")


def parse_document(text: Optional[str]) -> Optional[Any]:
    """Parse response text; empty or malformed text gives None"""
    if not text:
        return None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError):
        return None


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def has(value: Any, key: str) -> bool:
    """True if value is an object carrying a non-null key"""
    return is_object(value) and value.get(key) is not None


def get(value: Any, key: str) -> Optional[Any]:
    if not is_object(value):
        return None
    return value.get(key)


def get_string(value: Any, key: str) -> Optional[str]:
    field = get(value, key)
    return field if isinstance(field, str) else None


def get_int64(value: Any, key: str) -> Optional[int]:
    field = get(value, key)
    # bool is a subclass of int
    if isinstance(field, bool):
        return None
    if isinstance(field, float):
        if not field.is_integer():
            return None
        field = int(field)
    if not isinstance(field, int):
        return None
    if field < INT64_MIN or field > INT64_MAX:
        return None
    return field


def get_double(value: Any, key: str) -> Optional[float]:
    field = get(value, key)
    if isinstance(field, bool) or not isinstance(field, (int, float)):
        return None
    # NaN and overflowing literals such as 1e999 are not coordinates
    field = float(field)
    return field if math.isfinite(field) else None


def iter_array(value: Any, key: str) -> Iterator[Any]:
    """Iterate an array field in document order; absent or non-array yields nothing"""
    field = get(value, key)
    if isinstance(field, list):
        yield from field
