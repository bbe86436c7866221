"""
Request body decoding.

Write endpoints accept the same fields from JSON documents and from
HTML form submissions.  ``read_payload`` is used as a FastAPI
dependency and always hands the endpoint a plain ``dict``; anything it
cannot interpret as a mapping of fields becomes an empty payload so
that the endpoint's own presence checks decide the outcome.
"""

import json
import logging
from typing import Any, Dict

from fastapi import HTTPException, Request, status

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


async def read_payload(request: Request) -> Dict[str, Any]:
    """Decode the request body into a dictionary of fields.

    ``application/json`` (and ``+json`` suffixed types) are parsed with
    :mod:`json`; form bodies go through Starlette's form parser.  Any
    other content type, an empty body or a JSON document whose top level
    is not an object yields ``{}``.  Malformed JSON is rejected with
    HTTP 400.
    """
    media_type = _media_type(request)

    if media_type == "application/json" or media_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Rejected malformed JSON body on %s %s", request.method, request.url.path)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed request body")
        return data if isinstance(data, dict) else {}

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form.items())

    return {}
