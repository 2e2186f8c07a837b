"""
Google login.

The authorization step hands back the state and PKCE verifier for the caller
to keep (the HTTP layer stores them in short-lived cookies). The callback step
checks the state, exchanges the code and finds or creates the matching user.
"""
import logging
import secrets
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError as SchemaValidationError

from storefront.db import schemas
from storefront.db.repositories.users import UserRepository
from storefront.errors import AuthenticationError, DomainError
from storefront.services.google_oauth import GoogleOAuthClient, generate_code_verifier, generate_state
from storefront.utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)

MISSING_CONFIG_MESSAGE = (
    "Missing Google OAuth configuration. Please set GOOGLE_CLIENT_ID, "
    "GOOGLE_CLIENT_SECRET, and GOOGLE_REDIRECT_URI"
)


class AuthService:
    def __init__(
        self,
        user_repository: UserRepository,
        client: Optional[GoogleOAuthClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.user_repository = user_repository
        settings = settings or get_settings()
        if client is None and settings.google_oauth_configured:
            client = GoogleOAuthClient(
                settings.google_client_id,
                settings.google_client_secret,
                settings.google_redirect_uri,
            )
        self.client = client

    def _require_client(self) -> GoogleOAuthClient:
        if self.client is None:
            logger.error("Google OAuth is not configured")
            raise DomainError(MISSING_CONFIG_MESSAGE)
        return self.client

    def create_authorization_url(self) -> Dict[str, str]:
        """Return ``url``, ``state`` and ``code_verifier`` for a new login."""
        client = self._require_client()
        state = generate_state()
        code_verifier = generate_code_verifier()
        url = client.create_authorization_url(state, code_verifier)
        logger.debug("Created Google authorization URL")
        return {"url": url, "state": state, "code_verifier": code_verifier}

    def validate_callback(
        self,
        code: str,
        stored_state: Optional[str],
        received_state: Optional[str],
        code_verifier: Optional[str],
    ) -> Dict[str, Any]:
        client = self._require_client()
        if not stored_state or not received_state or not secrets.compare_digest(stored_state, received_state):
            logger.warning("OAuth callback rejected: state mismatch")
            raise AuthenticationError("Invalid state parameter")
        if not code_verifier:
            raise AuthenticationError("Missing code verifier")

        try:
            access_token = client.validate_authorization_code(code, code_verifier)
            profile = schemas.GoogleUserInfo.model_validate(client.fetch_user_info(access_token))
        except SchemaValidationError as exc:
            logger.warning("Unexpected Google userinfo payload: %s", exc)
            raise AuthenticationError("Failed to fetch user info from Google") from exc
        except requests.RequestException as exc:
            logger.error("OAuth callback failed: %s", exc)
            raise DomainError(f"OAuth callback failed: {exc}") from exc

        if not profile.verified_email:
            logger.warning("OAuth callback rejected: unverified email %s", profile.email)
            raise AuthenticationError("Email not verified by Google")

        name = profile.name or profile.email
        user = self.user_repository.find_by_email(profile.email)
        if user is None:
            user = self.user_repository.create({"name": name, "email": profile.email, "cellphone": ""})
            logger.info("Created user %s from Google login", user.id)
        logger.info("Google login succeeded for user %s", user.id)
        return {"user_id": user.id, "email": profile.email, "name": name}
