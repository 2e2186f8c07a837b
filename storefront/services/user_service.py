"""
User service: field rules for account data on top of the user repository.
"""
import logging
import re
import uuid
from typing import Any, Dict, Optional

from storefront.db import schemas
from storefront.db.repositories.users import UserRepository
from storefront.errors import ValidationError
from storefront.utils.pagination import to_paginated

logger = logging.getLogger(__name__)

MIN_CELLPHONE_DIGITS = 10
# Columns a partial update may change but never clear
REQUIRED_FIELDS = ("name", "email", "cellphone")


def _validate_name(name: str) -> None:
    if not name.strip():
        raise ValidationError("Name cannot be empty")


def _validate_cellphone(cellphone: str) -> None:
    if len(re.sub(r"\D", "", cellphone)) < MIN_CELLPHONE_DIGITS:
        raise ValidationError("Invalid cellphone number")


class UserService:
    """Service class for user accounts."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def get_all_users(self, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching all users page=%s limit=%s", page, limit)
        items, total = self.repository.find_all(page, limit)
        logger.info("Users fetched successfully count=%s total=%s", len(items), total)
        return to_paginated(items, total, page, limit)

    def get_user_by_id(self, id: uuid.UUID):
        logger.debug("Fetching user by id %s", id)
        return self.repository.find_by_id(id)

    def create_user(self, data: schemas.UserCreate):
        logger.debug("Creating user %s", data.email)
        try:
            _validate_name(data.name)
            _validate_cellphone(data.cellphone)
        except ValidationError as exc:
            logger.warning("User creation failed: %s", exc.message)
            raise
        self._ensure_email_available(data.email)

        user = self.repository.create(data.model_dump())
        logger.info("User created successfully id=%s", user.id)
        return user

    def update_user(self, id: uuid.UUID, data: schemas.UserUpdate):
        values = data.model_dump(exclude_unset=True)
        logger.debug("Updating user %s fields=%s", id, sorted(values))
        try:
            for field in REQUIRED_FIELDS:
                if field in values and values[field] is None:
                    raise ValidationError(f"{field.capitalize()} cannot be null")
            if values.get("name") is not None:
                _validate_name(values["name"])
            if values.get("cellphone") is not None:
                _validate_cellphone(values["cellphone"])
        except ValidationError as exc:
            logger.warning("User update failed for %s: %s", id, exc.message)
            raise
        if values.get("email") is not None:
            self._ensure_email_available(values["email"], current_id=id)

        user = self.repository.update(id, values)
        logger.info("User updated successfully id=%s", id)
        return user

    def delete_user(self, id: uuid.UUID) -> None:
        logger.debug("Deleting user %s", id)
        self.repository.delete(id)
        logger.info("User deleted successfully id=%s", id)

    def _ensure_email_available(self, email: str, current_id: Optional[uuid.UUID] = None) -> None:
        existing = self.repository.find_by_email(email)
        if existing is not None and existing.id != current_id:
            logger.warning("Email already registered: %s", email)
            raise ValidationError("Email already in use")
