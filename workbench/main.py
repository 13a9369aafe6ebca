from __future__ import annotations

import os

import uvicorn

from workbench.engine import build_app
from workbench.logger import setup_logger

setup_logger()
app = build_app()


def run() -> None:
    uvicorn.run(
        "workbench.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
