from __future__ import annotations

import hashlib
import re
from typing import Any, Dict, Tuple

import structlog

from modules.workbench_core.core.rng import (
    RandomBytes,
    now_millis,
    parse_count,
    secure_random_bytes,
)
from workbench.errors import ValidationError
from workbench.settings import get_settings

logger = structlog.get_logger(__name__)

# RFC 4122, appendix C
NAMESPACE_DNS = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_URL = "6ba7b811-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_OID = "6ba7b812-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_X500 = "6ba7b814-9dad-11d1-80b4-00c04fd430c8"

NAMESPACES = {
    "dns": NAMESPACE_DNS,
    "url": NAMESPACE_URL,
    "oid": NAMESPACE_OID,
    "x500": NAMESPACE_X500,
}

# 100-ns intervals between 1582-10-15 and 1970-01-01
UUID_EPOCH_OFFSET = 0x01B21DD213814000

VERSIONS = ("1", "4", "5")
DEFAULT_COUNT = 1

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def _format(b: bytes | bytearray) -> str:
    hexs = bytes(b).hex()
    return f"{hexs[0:8]}-{hexs[8:12]}-{hexs[12:16]}-{hexs[16:20]}-{hexs[20:32]}"


def _stamp(b: bytearray, version: int) -> bytearray:
    b[6] = (version << 4) | (b[6] & 0x0F)
    b[8] = 0x80 | (b[8] & 0x3F)  # variant RFC 4122
    return b


def uuid_v4(random_bytes: RandomBytes = secure_random_bytes) -> str:
    return _format(_stamp(bytearray(random_bytes(16)), 4))


def uuid_v1(
    timestamp_ms: int | None = None,
    random_bytes: RandomBytes = secure_random_bytes,
) -> str:
    """Time-based UUID.

    Node and clock sequence are drawn fresh on every call, so two v1 values
    from the same process do not share a node id. The node carries the
    multicast bit to mark it as not derived from a hardware address.
    """
    if timestamp_ms is None:
        timestamp_ms = now_millis()
    ticks = timestamp_ms * 10_000 + UUID_EPOCH_OFFSET

    time_low = ticks & 0xFFFFFFFF
    time_mid = (ticks >> 32) & 0xFFFF
    time_high = (ticks >> 48) & 0x0FFF

    clock_seq = bytearray(random_bytes(2))
    node = bytearray(random_bytes(6))
    node[0] |= 0x01

    b = bytearray(16)
    b[0:4] = time_low.to_bytes(4, "big")
    b[4:6] = time_mid.to_bytes(2, "big")
    b[6:8] = time_high.to_bytes(2, "big")
    b[8:10] = clock_seq
    b[10:16] = node
    return _format(_stamp(b, 1))


def uuid_v5(namespace: str, name: str) -> str:
    """Name-based UUID (SHA-1). Same namespace and name always give the same value."""
    if not name or not name.strip():
        raise ValidationError("Name is required for UUID v5.")
    if not isinstance(namespace, str) or not _UUID_PATTERN.fullmatch(namespace):
        raise ValidationError("Invalid namespace UUID format.")

    namespace_bytes = bytes.fromhex(namespace.replace("-", ""))
    digest = hashlib.sha1(namespace_bytes + name.encode("utf-8")).digest()
    return _format(_stamp(bytearray(digest[:16]), 5))


def resolve_namespace(value: Any) -> str:
    if value is None or not str(value).strip():
        return NAMESPACE_DNS
    raw = str(value).strip()
    return NAMESPACES.get(raw.lower(), raw)


def generate_uuids(
    count: Any = DEFAULT_COUNT,
    *,
    version: Any = "4",
    namespace: Any = None,
    name: str | None = None,
) -> Tuple[Dict[str, Any] | None, str | None]:
    version_str = str(version or "4").strip().lstrip("vV")
    if version_str not in VERSIONS:
        return None, "Version must be 1, 4, or 5."

    count_int, error = parse_count(
        count, default=DEFAULT_COUNT, maximum=get_settings().max_count
    )
    if error or count_int is None:
        return None, error

    if version_str == "1":
        values = [uuid_v1() for _ in range(count_int)]
    elif version_str == "4":
        values = [uuid_v4() for _ in range(count_int)]
    else:
        namespace_value = resolve_namespace(namespace)
        try:
            value = uuid_v5(namespace_value, name or "")
        except ValidationError as exc:
            logger.info("uuid_v5_rejected", reason=exc.detail)
            return None, exc.detail
        values = [value] * count_int

    logger.debug("uuids_generated", version=version_str, count=count_int)
    payload: Dict[str, Any] = {
        "count": count_int,
        "version": int(version_str),
        "values": values,
    }
    if version_str == "5":
        payload["namespace"] = namespace_value.lower()
        payload["name"] = name
    return payload, None
