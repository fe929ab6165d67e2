# Standard library imports
from typing import List, Tuple

# External package imports
from starlette.types import ASGIApp, Message, Receive, Scope, Send

# Local application imports
from ...core.cookie_policy import apply_to_set_cookie_header

SET_COOKIE = b"set-cookie"


class CookiePolicyMiddleware:
    """Apply the cookie policy to every Set-Cookie header (appends and deletes alike)"""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_policy(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers: List[Tuple[bytes, bytes]] = []
                for name, value in message.get("headers", []):
                    if name.lower() == SET_COOKIE:
                        value = apply_to_set_cookie_header(value.decode("latin-1")).encode("latin-1")
                    headers.append((name, value))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_policy)
