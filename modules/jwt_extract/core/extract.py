from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Tuple

from workbench.settings import get_settings


def base64url_decode(segment: str) -> str:
    padded = segment + "=" * (-len(segment) % 4)
    try:
        data = base64.urlsafe_b64decode(padded.encode("ascii"))
        return data.decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ValueError("Invalid base64url encoding") from exc


def _decode_part(segment: str, label: str) -> Any:
    text = base64url_decode(segment)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{label} is not valid JSON: {exc.msg}") from exc


def extract_jwt(token: str | None) -> Tuple[Dict[str, Any] | None, str | None]:
    """Decode header and payload of a compact JWT. The signature is not verified."""
    if token is None or not token.strip():
        return None, "Token is required."

    raw = token.strip()
    if len(raw.encode("utf-8")) > get_settings().max_json_bytes:
        return None, "Token is too large."

    parts = raw.split(".")
    if len(parts) != 3:
        return None, "Invalid JWT format. JWT should have 3 parts separated by dots."

    header_part, payload_part, _signature = parts
    try:
        header = _decode_part(header_part, "Header")
        payload = _decode_part(payload_part, "Payload")
    except ValueError as exc:
        return None, str(exc)

    return {
        "header": header,
        "payload": payload,
        "header_pretty": json.dumps(header, indent=2, ensure_ascii=False),
        "payload_pretty": json.dumps(payload, indent=2, ensure_ascii=False),
    }, None
