from __future__ import annotations

from typing import Any, Dict, List, Tuple

import structlog

from modules.workbench_core.core.base32 import CROCKFORD, encode_bits, encode_fixed_width
from modules.workbench_core.core.rng import (
    RandomBytes,
    now_millis,
    parse_count,
    secure_random_bytes,
)
from workbench.settings import get_settings

logger = structlog.get_logger(__name__)

TIME_LENGTH = 10
RANDOM_LENGTH = 16
RANDOM_BYTES = 10
TOTAL_LENGTH = TIME_LENGTH + RANDOM_LENGTH
DEFAULT_COUNT = 10


def ulid(timestamp_ms: int, random_bytes: RandomBytes = secure_random_bytes) -> str:
    """Build a 26-character ULID from a millisecond timestamp and 80 random bits."""
    time_part = encode_fixed_width(timestamp_ms, TIME_LENGTH)
    random_part = encode_bits(random_bytes(RANDOM_BYTES))
    random_part = random_part.ljust(RANDOM_LENGTH, CROCKFORD[0])[:RANDOM_LENGTH]
    return time_part + random_part


def generate_ulids(
    count: Any,
    *,
    uppercase: bool = True,
) -> Tuple[Dict[str, Any] | None, str | None]:
    count_int, error = parse_count(
        count, default=DEFAULT_COUNT, maximum=get_settings().max_count
    )
    if error or count_int is None:
        return None, error

    values: List[str] = [ulid(now_millis()) for _ in range(count_int)]
    if not uppercase:
        values = [value.lower() for value in values]

    logger.debug("ulids_generated", count=count_int, uppercase=bool(uppercase))
    return {
        "count": count_int,
        "uppercase": bool(uppercase),
        "values": values,
    }, None
