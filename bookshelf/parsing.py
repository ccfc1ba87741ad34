import math
import re
from typing import Any, Mapping, Optional


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Largest value an INTEGER column holds on every supported backend.
MAX_INT = 2**31 - 1


def parse_positive_int(value: Any) -> Optional[int]:
    """Coerce numeric or numeric-string input to a positive int.

    Floats are floored and strings are read up to the first non-digit,
    so ``"12"`` and ``"12.9"`` both give 12. Returns None for bools,
    non-finite numbers, non-numeric strings, anything below 1 and
    anything above ``MAX_INT``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        parsed = math.floor(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        parsed = int(match.group(1))
    else:
        return None
    return parsed if 0 < parsed <= MAX_INT else None


def first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def as_non_empty_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None
