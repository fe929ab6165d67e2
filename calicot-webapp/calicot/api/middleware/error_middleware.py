# Standard library imports
from typing import Awaitable, Callable

# External package imports
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

ErrorHandler = Callable[[Request, Exception], Awaitable[Response]]


class UnhandledErrorMiddleware:
    """
    Turn unhandled exceptions into the handler's response.

    Installed inside CORSMiddleware so error responses still carry the CORS
    headers. Once the response has started the exception is re-raised.
    """

    def __init__(self, app: ASGIApp, handler: ErrorHandler) -> None:
        self.app = app
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception as exception:
            if response_started:
                raise
            response = await self.handler(Request(scope), exception)
            await response(scope, receive, send)
