from __future__ import annotations

import secrets
import time
from typing import Any, Callable, Tuple

RandomBytes = Callable[[int], bytes]


def secure_random_bytes(n: int) -> bytes:
    """Fresh cryptographically secure bytes; never cached between calls."""
    return secrets.token_bytes(n)


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def parse_count(
    value: Any,
    *,
    default: int,
    maximum: int,
    label: str = "Count",
) -> Tuple[int | None, str | None]:
    if value is None or str(value).strip() == "":
        return default, None
    raw = str(value).strip()
    try:
        number = int(raw)
    except ValueError:
        return None, f"{label} must be a whole number."
    if number <= 0 or number > maximum:
        return None, f"{label} must be between 1 and {maximum}."
    return number, None
