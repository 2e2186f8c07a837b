import uuid
from typing import Optional
from pydantic import BaseModel


class AuthorizationUrl(BaseModel):
    url: str
    state: str


class GoogleUserInfo(BaseModel):
    id: Optional[str] = None
    email: str
    verified_email: bool = False
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    picture: Optional[str] = None


class AuthSession(BaseModel):
    user_id: uuid.UUID
    email: str
    name: str


class AuthCallbackResult(BaseModel):
    message: str
    user: AuthSession
