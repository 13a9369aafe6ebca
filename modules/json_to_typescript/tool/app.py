from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.json_to_typescript.core.convert import DEFAULT_ROOT_NAME, convert_json_text
from workbench.errors import ValidationError, register_error_handlers
from workbench.settings import shared_templates_dir

app = FastAPI(title="JSON to TypeScript")
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
    return templates.TemplateResponse(request, "index.html", {"base_path": base_path})


@app.post("/convert")
def convert(
    json_text: str | None = Form(None),
    use_multiple_interfaces: bool = Form(False),
    root_name: str | None = Form(DEFAULT_ROOT_NAME),
):
    result, error = convert_json_text(
        json_text,
        use_multiple_interfaces=use_multiple_interfaces,
        root_name=root_name,
    )
    if error:
        raise ValidationError(error)
    return result
