"""
HTTP middleware for request logging and error containment.

``log_requests`` writes one access line per request in the Apache
combined log format.  ``error_boundary`` wraps every handler
invocation: any exception that is not an ``HTTPException`` is logged
with its traceback and replaced by a generic 500 response, so no
internal detail reaches the client.

Both functions are registered with ``app.middleware("http")`` in
``main.create_app``.
"""

import logging
from datetime import datetime, timezone

from fastapi import Request, status

from .errors import error_response

access_logger = logging.getLogger("users_api.access")
logger = logging.getLogger(__name__)


def format_access_line(request: Request, status_code: int, content_length: str) -> str:
    """Render a request/response pair as a combined log format line."""
    remote = request.client.host if request.client else "-"
    when = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    referer = request.headers.get("referer") or "-"
    user_agent = request.headers.get("user-agent") or "-"
    return (
        f'{remote} - - [{when}] "{request.method} {target} HTTP/{http_version}" '
        f'{status_code} {content_length} "{referer}" "{user_agent}"'
    )


async def log_requests(request: Request, call_next):
    response = await call_next(request)
    access_logger.info(
        format_access_line(request, response.status_code, response.headers.get("content-length", "-"))
    )
    return response


async def error_boundary(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
