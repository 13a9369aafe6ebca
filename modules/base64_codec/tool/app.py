from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.base64_codec.core.codec import transform_base64
from workbench.errors import ValidationError, register_error_handlers
from workbench.settings import shared_templates_dir

app = FastAPI(title="Base64 Encode & Decode")
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


@app.post("/transform")
def transform(
    text: str | None = Form(None),
    mode: str = Form("encode"),
):
    result, error = transform_base64(text, mode=mode)
    if error:
        raise ValidationError(error)
    return result
