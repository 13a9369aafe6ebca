from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from workbench.errors import register_error_handlers
from workbench.lint import import_attr
from workbench.registry import load_modules

logger = structlog.get_logger(__name__)

CATEGORY_DESCRIPTIONS = {
    "Identifiers": "Generate UUIDs and ULIDs for fixtures, keys, and logs.",
    "Encoding": "Encode, decode, and inspect tokens and text payloads.",
    "Data": "Turn JSON samples into type declarations.",
    "Other": "Useful modules that do not fit a core category.",
}
DEFAULT_CATEGORY_DESCRIPTION = "Practical utilities for quick tasks."


def _slugify(value: str) -> str:
    return value.strip().lower().replace(" ", "-")


def build_categories(modules: dict[str, dict[str, Any]] | None = None) -> list[dict[str, Any]]:
    if modules is None:
        modules = load_modules()
    public = [module for module in modules.values() if module.get("public", True)]
    grouped: dict[str, list[dict[str, Any]]] = {}
    for module in public:
        category = module.get("category") or "Other"
        grouped.setdefault(str(category), []).append(module)

    categories: list[dict[str, Any]] = []
    for category, items in sorted(grouped.items(), key=lambda item: item[0].lower()):
        items.sort(key=lambda item: item.get("title") or item.get("name", ""))
        categories.append(
            {
                "name": category,
                "slug": _slugify(category),
                "description": CATEGORY_DESCRIPTIONS.get(
                    category, DEFAULT_CATEGORY_DESCRIPTION
                ),
                "modules": items,
            }
        )
    return categories


def build_app() -> FastAPI:
    app = FastAPI(title="Workbench")
    register_error_handlers(app)

    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    modules = load_modules()

    @app.get("/", response_class=HTMLResponse)
    def workbench_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"categories": build_categories(modules), "base_path": base_path},
        )

    @app.get("/category/{slug}", response_class=HTMLResponse)
    def category_index(request: Request, slug: str):
        categories = build_categories(modules)
        category = next((item for item in categories if item["slug"] == slug), None)
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "category.html",
            {"category": category, "base_path": base_path},
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "modules": sorted(modules.keys())}

    for meta in modules.values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue
        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError):
            logger.warning("module_mount_failed", module=meta["name"], entrypoint=api_entry, exc_info=True)
            continue

        mount_path = meta.get("mount") or f"/{meta.get('slug', meta['name'])}"
        app.mount(mount_path, subapp)
        logger.debug("module_mounted", module=meta["name"], mount=mount_path)

    return app
