"""
aiohttp integration.

Builds an application with a single catch-all route and converts between
aiohttp requests/responses and the echo models.
"""
from typing import Callable

from aiohttp import web

from .models.echo import InboundRequest, OutboundResponse

Responder = Callable[[InboundRequest], OutboundResponse]

# Any method, any path
CATCH_ALL_PATH = "/{tail:.*}"


async def to_inbound_request(request: web.BaseRequest) -> InboundRequest:
    """Read the full body and snapshot the request."""
    body = await request.read()
    return InboundRequest(
        method=request.method,
        uri=request.raw_path,
        headers=list(request.headers.items()),
        body=body,
    )


def to_web_response(response: OutboundResponse) -> web.Response:
    return web.Response(
        status=response.status_code,
        headers=response.headers,
        body=response.body,
    )


def create_app(responder: Responder, max_body_size: int = 10 * 1024 * 1024) -> web.Application:
    """
    Create the aiohttp application dispatching every request to ``responder``.

    Args:
        responder: Function mapping an InboundRequest to an OutboundResponse
        max_body_size: Largest request body accepted, in bytes

    Returns:
        Configured aiohttp application
    """

    async def dispatch(request: web.Request) -> web.Response:
        inbound = await to_inbound_request(request)
        return to_web_response(responder(inbound))

    app = web.Application(client_max_size=max_body_size)
    app.router.add_route("*", CATCH_ALL_PATH, dispatch)
    return app
