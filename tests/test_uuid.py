import uuid

import pytest

from modules.uuidgen.core.generate import (
    NAMESPACE_DNS,
    NAMESPACE_OID,
    NAMESPACE_URL,
    NAMESPACE_X500,
    UUID_EPOCH_OFFSET,
    generate_uuids,
    uuid_v1,
    uuid_v4,
    uuid_v5,
)
from workbench.errors import ValidationError


def test_namespaces_match_rfc_4122() -> None:
    assert NAMESPACE_DNS == str(uuid.NAMESPACE_DNS)
    assert NAMESPACE_URL == str(uuid.NAMESPACE_URL)
    assert NAMESPACE_OID == str(uuid.NAMESPACE_OID)
    assert NAMESPACE_X500 == str(uuid.NAMESPACE_X500)


def test_v4_bit_stamping(zero_bytes, full_bytes) -> None:
    assert uuid_v4(zero_bytes) == "00000000-0000-4000-8000-000000000000"
    assert uuid_v4(full_bytes) == "ffffffff-ffff-4fff-bfff-ffffffffffff"


def test_v4_random_values() -> None:
    for _ in range(100):
        value = uuid_v4()
        assert value[14] == "4"
        assert value[19] in "89ab"
        assert value == value.lower()
        assert uuid.UUID(value).version == 4


def test_v1_layout(zero_bytes) -> None:
    millis = 1_700_000_000_123
    parsed = uuid.UUID(uuid_v1(millis, zero_bytes))
    assert parsed.version == 1
    assert parsed.variant == uuid.RFC_4122
    assert parsed.time == millis * 10_000 + UUID_EPOCH_OFFSET
    # multicast bit: lowest bit of the first node byte
    assert parsed.node == 0x01 << 40
    assert parsed.clock_seq == 0


def test_v1_epoch_maps_to_offset(zero_bytes) -> None:
    assert uuid.UUID(uuid_v1(0, zero_bytes)).time == UUID_EPOCH_OFFSET


def test_v1_node_is_random_per_call() -> None:
    first = uuid.UUID(uuid_v1(1_700_000_000_000))
    second = uuid.UUID(uuid_v1(1_700_000_000_000))
    assert first.time == second.time
    assert (first.node >> 40) & 0x01
    assert (second.node >> 40) & 0x01
    assert (first.node, first.clock_seq) != (second.node, second.clock_seq)


def test_v5_matches_reference_and_is_deterministic() -> None:
    first = uuid_v5(NAMESPACE_DNS, "example.com")
    assert first == uuid_v5(NAMESPACE_DNS, "example.com")
    assert first == str(uuid.uuid5(uuid.NAMESPACE_DNS, "example.com"))
    assert first[14] == "5"


def test_v5_accepts_uppercase_namespace() -> None:
    assert uuid_v5(NAMESPACE_URL.upper(), "https://example.com/") == str(
        uuid.uuid5(uuid.NAMESPACE_URL, "https://example.com/")
    )


def test_v5_hashes_utf8_names() -> None:
    assert uuid_v5(NAMESPACE_DNS, "zażółć.pl") == str(
        uuid.uuid5(uuid.NAMESPACE_DNS, "zażółć.pl")
    )


@pytest.mark.parametrize(
    "namespace, name",
    [
        (NAMESPACE_DNS, ""),
        (NAMESPACE_DNS, "   "),
        ("not-a-uuid", "example.com"),
        ("6ba7b8109dad11d180b400c04fd430c8", "example.com"),
        (NAMESPACE_DNS + "\n", "example.com"),
    ],
)
def test_v5_rejects_bad_input(namespace: str, name: str) -> None:
    with pytest.raises(ValidationError):
        uuid_v5(namespace, name)


def test_generate_uuids_v4_default() -> None:
    payload, error = generate_uuids()
    assert error is None
    assert payload["version"] == 4
    assert payload["count"] == 1
    assert len(payload["values"]) == 1


def test_generate_uuids_v1_batch() -> None:
    payload, error = generate_uuids("5", version="1")
    assert error is None
    assert [uuid.UUID(value).version for value in payload["values"]] == [1] * 5


def test_generate_uuids_v5_resolves_named_namespace() -> None:
    payload, error = generate_uuids(2, version="v5", namespace="url", name="https://example.com/")
    assert error is None
    expected = str(uuid.uuid5(uuid.NAMESPACE_URL, "https://example.com/"))
    assert payload["values"] == [expected, expected]
    assert payload["namespace"] == NAMESPACE_URL


def test_generate_uuids_v5_defaults_to_dns() -> None:
    payload, error = generate_uuids(version="5", name="example.com")
    assert error is None
    assert payload["values"] == [str(uuid.uuid5(uuid.NAMESPACE_DNS, "example.com"))]


def test_generate_uuids_reports_errors() -> None:
    assert generate_uuids(version="3") == (None, "Version must be 1, 4, or 5.")
    assert generate_uuids(version="5") == (None, "Name is required for UUID v5.")
    assert generate_uuids(version="5", namespace="nope", name="x") == (
        None,
        "Invalid namespace UUID format.",
    )
    assert generate_uuids("0")[1] == "Count must be between 1 and 1000."
