"""
CORS headers middleware.

Adds cross-origin headers to API responses for the allowed methods:
- Access-Control-Allow-Origin
- Access-Control-Allow-Methods
- Access-Control-Allow-Headers

Headers are set on success and error responses alike.
Optionally answers OPTIONS preflight requests directly.

No business logic. Pure cross-cutting concern.
"""

from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_ALLOW_ORIGIN = "*"
DEFAULT_ALLOW_METHODS = ("GET", "POST", "DELETE", "PATCH")
DEFAULT_ALLOW_HEADERS = ("Authorization", "Content-Type")

HTTP_204 = 204


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds CORS headers to responses under a path prefix.

    Only requests whose method is one of ``allow_methods`` receive the
    headers. Every request is passed on to the next stage, except
    preflight requests when ``handle_preflight`` is enabled.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = DEFAULT_ALLOW_ORIGIN,
        allow_methods: Iterable[str] = DEFAULT_ALLOW_METHODS,
        allow_headers: Iterable[str] = DEFAULT_ALLOW_HEADERS,
        path_prefix: str = "",
        handle_preflight: bool = False,
    ) -> None:
        super().__init__(app)
        self.allow_methods = tuple(method.upper() for method in allow_methods)
        self.path_prefix = path_prefix.rstrip("/")
        self.handle_preflight = handle_preflight
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ",".join(self.allow_methods),
            "Access-Control-Allow-Headers": ",".join(allow_headers),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add CORS headers to the response."""
        if not self._in_scope(request.url.path):
            return await call_next(request)

        if self.handle_preflight and self._is_preflight(request):
            return Response(status_code=HTTP_204, headers=self.headers)

        response = await call_next(request)
        if request.method in self.allow_methods:
            for header_name, header_value in self.headers.items():
                response.headers[header_name] = header_value
        return response

    def _in_scope(self, path: str) -> bool:
        if not self.path_prefix:
            return True
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")

    @staticmethod
    def _is_preflight(request: Request) -> bool:
        return (
            request.method == "OPTIONS"
            and "access-control-request-method" in request.headers
        )
