from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.ulidgen.core.generate import generate_ulids
from workbench.errors import ValidationError, register_error_handlers
from workbench.settings import shared_templates_dir

app = FastAPI(title="ULID Generator")
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


@app.post("/generate")
def generate(
    count: str | None = Form("10"),
    uppercase: bool = Form(True),
):
    result, error = generate_ulids(count, uppercase=uppercase)
    if error:
        raise ValidationError(error)
    return result
