"""
Google federated login.

  GET /account/externallogin            redirect to Google's consent page
  GET /account/externallogincallback    finish the login and issue a JWT
"""
# Standard library imports
import logging
import secrets
from typing import Optional

# External package imports
import httpx
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

# Local application imports
from ...application.use_cases.auth.external_login import ExternalLoginUseCase
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])

EXTERNAL_SCHEME_COOKIE = "Identity.External"
EXTERNAL_COOKIE_MAX_AGE = 10 * 60


@router.get("/externallogin")
async def external_login() -> RedirectResponse:
    """
    Start a Google sign-in

    The state value is kept in the external sign-in cookie and checked on the
    callback.
    """
    use_case = get_container().get(ExternalLoginUseCase)
    state = secrets.token_urlsafe(32)
    try:
        url = use_case.build_challenge_url(state)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )

    response = RedirectResponse(url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        EXTERNAL_SCHEME_COOKIE,
        state,
        max_age=EXTERNAL_COOKIE_MAX_AGE,
        httponly=True,
        secure=True,
        samesite="none",
    )
    return response


@router.get("/externallogincallback")
async def external_login_callback(
    code: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
    error: Optional[str] = Query(default=None),
    external_state: Optional[str] = Cookie(default=None, alias=EXTERNAL_SCHEME_COOKIE),
) -> JSONResponse:
    """
    Complete a Google sign-in

    Returns:
        AuthenticateResponse body; the external sign-in cookie is deleted
    """
    if error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error from external provider: {error}"
        )
    if not code or not state or not external_state or not secrets.compare_digest(state, external_state):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid external login state"
        )

    use_case = get_container().get(ExternalLoginUseCase)
    try:
        result = await use_case.execute(code)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except httpx.HTTPStatusError as exception:
        logger.error(
            f"Google rejected the external login: {exception.response.status_code} - {exception.response.text}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="External provider rejected the login"
        )

    response = JSONResponse(content=result.model_dump(mode="json"))
    response.delete_cookie(EXTERNAL_SCHEME_COOKIE, secure=True, httponly=True, samesite="none")
    return response
