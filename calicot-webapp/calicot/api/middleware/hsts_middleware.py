# External package imports
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

HSTS_MAX_AGE_SECONDS = 30 * 24 * 60 * 60


class HstsMiddleware:
    """Add Strict-Transport-Security to every HTTP response"""

    def __init__(self, app: ASGIApp, max_age: int = HSTS_MAX_AGE_SECONDS) -> None:
        self.app = app
        self.header_value = f"max-age={max_age}"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_hsts(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers.setdefault("Strict-Transport-Security", self.header_value)
            await send(message)

        await self.app(scope, receive, send_with_hsts)
