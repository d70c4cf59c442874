"""
Public Redirects Routes.

Every request, whatever its path or method, is answered with a redirect.

Key behaviors:
- The path is matched as received, percent-encoding included
- Raw non-ASCII path bytes are percent-encoded, never decoded
- The raw query string is handed to the resolver unchanged
- Responses have no body; status and Location come from the resolver
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Request, Response

from redirector.api.deps import get_config
from redirector.components.redirects import RequestURL, resolve

logger = logging.getLogger(__name__)

router = APIRouter()

# ASCII characters left as sent; everything else in the raw path is escaped
PATH_SAFE_CHARS = "/%:@!$&'()*+,;=[]|^"


# --- Helper Functions ---


def request_url_of(request: Request) -> RequestURL:
    """
    Extract the path and raw query of an incoming request.

    Prefers the undecoded `raw_path` from the ASGI scope so that rule
    paths compare against exactly what the client sent.
    """
    raw_path: bytes | None = request.scope.get("raw_path")
    if raw_path:
        path = quote(raw_path.split(b"?", 1)[0], safe=PATH_SAFE_CHARS)
    else:
        path = request.scope["path"]

    query_string = request.scope.get("query_string", b"").decode("latin-1")
    query = f"?{query_string}" if query_string else ""

    return RequestURL(path=path, query=query)


# --- Routes ---


async def handle_redirect(request: Request) -> Response:
    """Redirect the request to its resolved destination."""
    request_url = request_url_of(request)
    result = resolve(request_url, get_config(request))

    logger.debug(
        "%s %s%s -> %s (%d)",
        request.method,
        request_url.path,
        request_url.query,
        result.url,
        result.status,
    )

    return Response(status_code=int(result.status), headers={"Location": result.url})


# A plain route with no method list, so any method (TRACE, PROPFIND, ...) matches
router.add_route("/{path:path}", handle_redirect, include_in_schema=False)
