from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Tuple

from workbench.settings import get_settings

MODES = ("encode", "decode")
DECODE_ERROR = "Failed to decode. Please check if the input is valid Base64."


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(text: str) -> str:
    """Decode standard Base64 into UTF-8 text; raises ``ValueError`` on bad input."""
    raw = "".join(text.split())
    try:
        data = base64.b64decode(raw, validate=True)
        return data.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(DECODE_ERROR) from exc


def transform_base64(
    text: str | None,
    *,
    mode: str = "encode",
) -> Tuple[Dict[str, Any] | None, str | None]:
    if text is None or text == "":
        return None, "Input is required."

    mode_value = (mode or "encode").strip().lower()
    if mode_value not in MODES:
        return None, "Mode must be encode or decode."

    limit = get_settings().max_json_bytes
    if len(text.encode("utf-8")) > limit:
        return None, f"Input must be {limit} bytes or less."

    if mode_value == "encode":
        output = encode_base64(text)
    else:
        try:
            output = decode_base64(text)
        except ValueError as exc:
            return None, str(exc)

    return {"mode": mode_value, "output": output}, None
