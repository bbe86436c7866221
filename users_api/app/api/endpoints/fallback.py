"""
Catch-all route for requests no other route matches.

It must be included after every other router: Starlette dispatches to
the first route whose path and method both match, so this route only
sees requests that nothing else claimed, including a known path with
an unsupported method.
"""

from fastapi import APIRouter, HTTPException, status

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def route_not_found(path: str) -> None:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
