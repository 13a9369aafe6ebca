from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

from workbench.settings import get_settings

logger = structlog.get_logger(__name__)


def _normalize_module(
    data: Dict[str, Any],
    *,
    path: Path | None = None,
) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or name.replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount,
            "public": bool(public),
        }
    )
    if path is not None:
        normalized["path"] = path
    return normalized


def load_modules(modules_path: Path | None = None) -> Dict[str, Dict[str, Any]]:
    """Read every ``modules/<name>/module.yaml`` manifest, keyed by module name."""
    root = modules_path or get_settings().modules_path
    modules: Dict[str, Dict[str, Any]] = {}
    if not root.exists():
        return modules

    for module_dir in sorted(root.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / "module.yaml"
        if not manifest.exists():
            continue
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning("manifest_not_mapping", module=module_dir.name)
            continue
        normalized = _normalize_module(data, path=module_dir)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules
