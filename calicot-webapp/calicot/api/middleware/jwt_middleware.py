# Standard library imports
import logging
from typing import Optional

# External package imports
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.container import get_container

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class JwtMiddleware(BaseHTTPMiddleware):
    """
    Attach the user named by a valid bearer token to request.state.user.

    Requests without a token, or with an invalid one, continue with
    request.state.user = None; rejecting them is left to the endpoints
    that require a user.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.user = None

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is not None:
            use_case = get_container().get(GetCurrentUserUseCase)
            try:
                request.state.user = await use_case.execute(token)
            except ValueError as exception:
                logger.info(f"Ignoring bearer token on {request.url.path}: {exception}")

        return await call_next(request)
