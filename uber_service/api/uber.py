from __future__ import annotations

from typing import Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.routing import Route

from uber_service.service import UberService


REQUEST_ID_HEADER = "X-Uber-Request-ID"


def get_service(request: Request) -> UberService:
    return request.app.state.service


async def uber_handler(request: Request) -> JSONResponse:
    response = get_service(request).handle(request.method, request.url.path)
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200,
        headers={REQUEST_ID_HEADER: response.request_id},
    )


class UberEndpoint:
    """ASGI endpoint for every method, including TRACE and extension methods.

    Starlette restricts plain-function endpoints to GET; a class endpoint
    keeps the route's method set open.
    """

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        response = await uber_handler(Request(scope, receive))
        await response(scope, receive, send)


uber_route = Route("/{path:path}", endpoint=UberEndpoint(), methods=None, name="uber")
