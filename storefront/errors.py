"""
Domain exceptions shared by repositories and services.

The API layer maps these to HTTP responses (see ``storefront.api.errors``).
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for all storefront domain errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when an entity lookup by id (or other key) finds nothing."""

    def __init__(self, resource: str, id: Optional[object] = None, message: Optional[str] = None):
        self.resource = resource
        self.id = id
        msg = message
        if msg is None:
            msg = f"{resource} with id {id} not found" if id is not None else f"{resource} not found"
        super().__init__(msg, "NOT_FOUND")


class ValidationError(DomainError):
    """Raised when input breaks a business rule."""

    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class DatabaseError(DomainError):
    """Raised when the persistence layer fails."""

    def __init__(self, message: str):
        super().__init__(message, "DATABASE_ERROR")


class AuthenticationError(DomainError):
    """Raised when an OAuth exchange cannot authenticate the caller."""

    def __init__(self, message: str):
        super().__init__(message, "AUTHENTICATION_ERROR")
