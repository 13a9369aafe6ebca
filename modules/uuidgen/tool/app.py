from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.uuidgen.core.generate import NAMESPACES, generate_uuids
from workbench.errors import ValidationError, register_error_handlers
from workbench.settings import shared_templates_dir

app = FastAPI(title="UUID Generator")
register_error_handlers(app)

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"base_path": base_path, "namespaces": NAMESPACES},
    )


@app.post("/generate")
def generate(
    count: str | None = Form("1"),
    version: str = Form("4"),
    namespace: str | None = Form(None),
    name: str | None = Form(None),
):
    result, error = generate_uuids(
        count,
        version=version,
        namespace=namespace,
        name=name,
    )
    if error:
        raise ValidationError(error)
    return result
