"""Query-string middleware: query parameter names are matched case-insensitively."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Lower-cased parameter name -> the spelling the routes declare.
QUERY_PARAM_NAMES = {
    "name": "name",
    "likeschocolate": "likesChocolate",
    "maxresults": "maxResults",
}


def canonical_query_string(query_string: bytes) -> bytes:
    """Rewrite known parameter names in ``query_string`` to their declared spelling."""
    pairs = parse_qsl(query_string.decode("latin-1"), keep_blank_values=True)
    pairs = [(QUERY_PARAM_NAMES.get(key.lower(), key), value) for key, value in pairs]
    return urlencode(pairs).encode("latin-1")


class CaseInsensitiveQueryMiddleware(BaseHTTPMiddleware):
    """Accept ``?LikesChocolate=true`` as well as ``?likesChocolate=true``."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        query_string = request.scope.get("query_string")
        if query_string:
            request.scope["query_string"] = canonical_query_string(query_string)
        return await call_next(request)
