from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any, Dict, List

import yaml

REQUIRED_FIELDS = ("name", "title", "version", "description", "category")


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def _mount_from(name: str, raw: str | None) -> str:
    mount = raw or f"/{name.replace('_', '-')}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    return mount


def lint_manifest(module_dir: Path, data: Dict[str, Any], *, import_entrypoint: bool = True) -> List[str]:
    issues: List[str] = []
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            issues.append(f"missing field: {field}")

    public = data.get("public")
    if public is None:
        public = True
    if not public:
        return issues

    entrypoints = data.get("entrypoints")
    api = entrypoints.get("api") if isinstance(entrypoints, dict) else None
    if not api:
        issues.append("missing entrypoints.api")
    elif ":" not in str(api):
        issues.append("entrypoints.api must be module:app")
    elif import_entrypoint:
        try:
            import_attr(str(api))
        except Exception as exc:
            issues.append(f"entrypoint: {exc}")

    if not (module_dir / "core").is_dir():
        issues.append("missing core/")
    if not (module_dir / "tool" / "app.py").exists():
        issues.append("missing tool/app.py")
    if not (module_dir / "tool" / "templates" / "index.html").exists():
        issues.append("missing tool/templates/index.html")
    return issues


def check_manifests(modules_dir: Path, *, import_entrypoints: bool = True) -> List[str]:
    """Return one ``"<dir>: <issue>"`` line per problem found across all manifests."""
    errors: List[str] = []
    mounts: Dict[str, str] = {}
    names: set[str] = set()

    for module_dir in sorted(modules_dir.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / "module.yaml"
        if not manifest.exists():
            continue
        try:
            data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            errors.append(f"{module_dir.name}: invalid YAML ({exc})")
            continue
        if not isinstance(data, dict):
            errors.append(f"{module_dir.name}: module.yaml must be a mapping")
            continue

        name = str(data.get("name") or "").strip() or module_dir.name
        if name in names:
            errors.append(f"{module_dir.name}: duplicate name '{name}'")
        else:
            names.add(name)

        for issue in lint_manifest(module_dir, data, import_entrypoint=import_entrypoints):
            errors.append(f"{module_dir.name}: {issue}")

        mount = _mount_from(name, data.get("mount"))
        if mount == "/":
            errors.append(f"{module_dir.name}: mount '/' is reserved")
        if " " in mount:
            errors.append(f"{module_dir.name}: mount contains spaces")
        if mount in mounts:
            errors.append(f"{module_dir.name}: mount '{mount}' duplicates {mounts[mount]}")
        else:
            mounts[mount] = name

    return errors
