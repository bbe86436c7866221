"""
Error envelope shared by every failing response.

Endpoints signal failures by raising :class:`fastapi.HTTPException`
with a human readable ``detail``.  The handler registered here turns
that into ``{"success": false, "error": <detail>}`` with the same
status code.  Unexpected exceptions never reach this module; they are
caught by the error boundary in ``core.middleware``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    # Registering the Starlette base class also covers fastapi.HTTPException.
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
