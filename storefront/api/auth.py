"""
Google login endpoints.

``/auth/google`` keeps the OAuth state and PKCE verifier in HTTP-only cookies
for ten minutes; ``/auth/google/callback`` reads them back and clears them.
"""
from typing import Optional
from fastapi import APIRouter, Cookie, Depends, Query, Response

from storefront.db import schemas
from storefront.api.deps import get_auth_service
from storefront.services.auth_service import AuthService
from storefront.utils.settings import get_settings

router = APIRouter(prefix="/auth", tags=["auth"])

STATE_COOKIE = "oauth_state"
CODE_VERIFIER_COOKIE = "oauth_code_verifier"
COOKIE_MAX_AGE = 60 * 10


def _set_oauth_cookie(response: Response, key: str, value: str) -> None:
    response.set_cookie(
        key=key,
        value=value,
        max_age=COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="lax",
        secure=get_settings().is_production,
    )


@router.get("/google", response_model=schemas.Envelope[schemas.AuthorizationUrl])
def google_login_endpoint(response: Response, service: AuthService = Depends(get_auth_service)):
    auth = service.create_authorization_url()
    _set_oauth_cookie(response, STATE_COOKIE, auth["state"])
    _set_oauth_cookie(response, CODE_VERIFIER_COOKIE, auth["code_verifier"])
    return {"data": {"url": auth["url"], "state": auth["state"]}}


@router.get("/google/callback", response_model=schemas.Envelope[schemas.AuthCallbackResult])
def google_callback_endpoint(
    response: Response,
    code: str = Query(...),
    state: str = Query(...),
    oauth_state: Optional[str] = Cookie(default=None),
    oauth_code_verifier: Optional[str] = Cookie(default=None),
    service: AuthService = Depends(get_auth_service),
):
    session = service.validate_callback(code, oauth_state, state, oauth_code_verifier)
    response.delete_cookie(STATE_COOKIE, path="/")
    response.delete_cookie(CODE_VERIFIER_COOKIE, path="/")
    return {"data": {"message": "Authentication successful", "user": session}}
