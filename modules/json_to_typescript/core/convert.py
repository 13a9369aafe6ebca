from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Tuple

import structlog

from workbench.settings import get_settings

logger = structlog.get_logger(__name__)

# two spaces per nesting level in both modes, including nested inline records
INDENT = "  "
DEFAULT_ROOT_NAME = "Root"
_NOT_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")


def sanitize_name(name: str) -> str:
    """Reduce ``name`` to a TypeScript identifier made of ``[A-Za-z0-9_$]``."""
    sanitized = _NOT_IDENTIFIER.sub("", name)
    if not sanitized or sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    return sanitized or "Item"


def type_name(name: str) -> str:
    sanitized = sanitize_name(name)
    return sanitized[:1].upper() + sanitized[1:]


def _primitive(value: Any) -> str:
    if value is None:
        return "null"
    # bool before number: True is an int in Python
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "unknown"


def _inline_type(value: Any, depth: int = 0) -> str:
    if isinstance(value, list):
        if not value:
            return "unknown[]"
        return f"{_inline_type(value[0], depth)}[]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = INDENT * depth
        lines = [
            f"{pad}{INDENT}{sanitize_name(str(key))}: {_inline_type(item, depth + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(lines) + f"\n{pad}}}"

    return _primitive(value)


class _InterfaceCollector:
    """Symbol table and declaration list for one multi-interface conversion."""

    def __init__(self) -> None:
        self.used_names: set[str] = set()
        self.declarations: List[str] = []

    def claim(self, base_name: str) -> str:
        name = type_name(base_name)
        if name in self.used_names:
            counter = 1
            while f"{name}{counter}" in self.used_names:
                counter += 1
            name = f"{name}{counter}"
        self.used_names.add(name)
        return name

    def type_of(self, value: Any, key: str) -> str:
        if isinstance(value, list):
            if not value:
                return "unknown[]"
            return f"{self.type_of(value[0], key)}[]"
        if isinstance(value, dict):
            return self.extract(value, key)
        return _primitive(value)

    def extract(self, obj: Dict[str, Any], base_name: str) -> str:
        # claim first so nested objects cannot take the parent's name
        name = self.claim(base_name)
        lines = [
            f"{INDENT}{sanitize_name(str(key))}: {self.type_of(item, str(key))}"
            for key, item in obj.items()
        ]
        if lines:
            body = "{\n" + "\n".join(lines) + "\n}"
        else:
            body = "{}"
        self.declarations.append(f"interface {name} {body}")
        return name

    def render(self) -> str:
        return "\n\n".join(dict.fromkeys(self.declarations))


def convert_to_typescript(
    value: Any,
    *,
    use_multiple_interfaces: bool = False,
    root_name: str = DEFAULT_ROOT_NAME,
) -> str:
    """Infer TypeScript declarations from an already parsed JSON value.

    Inline mode returns a single ``type Root = {...}`` alias. Multi-interface
    mode extracts every object into a named ``interface``; nested interfaces
    come before the interface that references them, and identical
    declarations are emitted once.
    """
    root = type_name(root_name or DEFAULT_ROOT_NAME)

    if use_multiple_interfaces:
        collector = _InterfaceCollector()
        collector.type_of(value, root)
        if collector.declarations:
            return collector.render()

    return f"type {root} = {_inline_type(value)}"


def convert_json_text(
    raw_text: str | None,
    *,
    use_multiple_interfaces: bool = False,
    root_name: str | None = None,
) -> Tuple[Dict[str, Any] | None, str | None]:
    if raw_text is None or not raw_text.strip():
        return None, "JSON input is required."

    limit = get_settings().max_json_bytes
    if len(raw_text.encode("utf-8")) > limit:
        return None, f"JSON input must be {limit} bytes or less."

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        return None, f"JSON error at line {exc.lineno}, column {exc.colno}: {exc.msg}"
    except RecursionError:
        return None, "JSON is too deeply nested to convert."

    root = (root_name or "").strip() or DEFAULT_ROOT_NAME
    try:
        output = convert_to_typescript(
            data,
            use_multiple_interfaces=use_multiple_interfaces,
            root_name=root,
        )
    except RecursionError:
        return None, "JSON is too deeply nested to convert."

    mode = "interfaces" if use_multiple_interfaces else "type"
    logger.debug("typescript_converted", mode=mode, length=len(output))
    return {
        "mode": mode,
        "root_name": type_name(root),
        "output": output,
    }, None
