from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class WorkbenchError(Exception):
    """Domain-level exception rendered as ``{"error": detail}`` by the tool apps."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class ValidationError(WorkbenchError):
    """Input rejected by an engine or a tool route."""


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(WorkbenchError)
    async def _workbench_error(request: Request, exc: WorkbenchError):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    # FastAPI answers form/query mistakes with a verbose 422; tools expose a short 400.
    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            {"error": "Invalid input."}, status_code=status.HTTP_400_BAD_REQUEST
        )


__all__ = ["WorkbenchError", "ValidationError", "register_error_handlers"]
