"""
Google OAuth 2.0 client (authorization code flow with PKCE).

Only the three calls the login flow needs: build the consent URL, exchange
the authorization code for an access token and fetch the user's profile.
"""
from __future__ import annotations

import base64
import hashlib
import logging
import secrets
from typing import Any, Dict, Sequence
from urllib.parse import urlencode

import requests

from storefront.errors import AuthenticationError

logger = logging.getLogger(__name__)

AUTHORIZATION_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_ENDPOINT = "https://oauth2.googleapis.com/token"
USERINFO_ENDPOINT = "https://www.googleapis.com/oauth2/v2/userinfo"
DEFAULT_SCOPES = ("openid", "profile", "email")

_DEFAULT_TIMEOUT = (3, 15)


def generate_state() -> str:
    return secrets.token_urlsafe(32)


def generate_code_verifier() -> str:
    return secrets.token_urlsafe(32)


def code_challenge(code_verifier: str) -> str:
    """S256 challenge: unpadded base64url of the verifier's SHA-256 digest."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


class GoogleOAuthClient:
    def __init__(self, client_id: str, client_secret: str, redirect_uri: str):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    def create_authorization_url(
        self, state: str, code_verifier: str, scopes: Sequence[str] = DEFAULT_SCOPES
    ) -> str:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "state": state,
            "scope": " ".join(scopes),
            "code_challenge": code_challenge(code_verifier),
            "code_challenge_method": "S256",
        }
        return f"{AUTHORIZATION_ENDPOINT}?{urlencode(params)}"

    def validate_authorization_code(self, code: str, code_verifier: str) -> str:
        """Exchange ``code`` for tokens and return the access token.

        Raises ``AuthenticationError`` when Google rejects the code.
        """
        response = requests.post(
            TOKEN_ENDPOINT,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.redirect_uri,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code_verifier": code_verifier,
            },
            headers={"Accept": "application/json"},
            timeout=_DEFAULT_TIMEOUT,
        )
        if not response.ok:
            logger.warning("Google token exchange rejected: status=%s", response.status_code)
            raise AuthenticationError("Invalid authorization code")
        access_token = response.json().get("access_token")
        if not access_token:
            raise AuthenticationError("Invalid authorization code")
        return access_token

    def fetch_user_info(self, access_token: str) -> Dict[str, Any]:
        response = requests.get(
            USERINFO_ENDPOINT,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=_DEFAULT_TIMEOUT,
        )
        if not response.ok:
            logger.warning("Google userinfo request failed: status=%s", response.status_code)
            raise AuthenticationError("Failed to fetch user info from Google")
        return response.json()
