"""
Response envelope for API routes.

Every API response is wrapped exactly once:
- success: ``{"result": <payload>}``, applied by EnvelopeResponse
  when FastAPI serializes the value returned by an endpoint;
- failure: ``{"result": {}, "errors": [...]}``, applied by EnvelopeRoute
  around everything the route runs (dependencies, body validation,
  rate limiting and the endpoint itself).

Endpoints return raw payloads and never build envelopes themselves.
"""

from typing import Any, Callable, Coroutine

from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import Response

from postboard.shared.errors.handlers import error_response


class EnvelopeResponse(JSONResponse):
    """JSON response that wraps the endpoint payload in the success envelope."""

    def render(self, content: Any) -> bytes:
        return super().render({"result": content})


class EnvelopeRoute(APIRoute):
    """API route that renders any raised error as a failure envelope."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def envelope_route_handler(request: Request) -> Response:
            try:
                return await route_handler(request)
            except Exception as exc:
                return error_response(exc)

        return envelope_route_handler
