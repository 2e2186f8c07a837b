"""
Users API endpoints.
"""
import uuid
from fastapi import APIRouter, Depends, status

from storefront.db import schemas
from storefront.api.deps import Pagination, get_pagination, get_user_service
from storefront.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=schemas.Page[schemas.User])
def list_users_endpoint(
    pagination: Pagination = Depends(get_pagination),
    service: UserService = Depends(get_user_service),
):
    return service.get_all_users(pagination.page, pagination.limit)


@router.get("/{user_id}", response_model=schemas.Envelope[schemas.User])
def get_user_endpoint(user_id: uuid.UUID, service: UserService = Depends(get_user_service)):
    return {"data": service.get_user_by_id(user_id)}


@router.post("", response_model=schemas.Envelope[schemas.User], status_code=status.HTTP_201_CREATED)
def create_user_endpoint(user: schemas.UserCreate, service: UserService = Depends(get_user_service)):
    return {"data": service.create_user(user)}


@router.patch("/{user_id}", response_model=schemas.Envelope[schemas.User])
def update_user_endpoint(
    user_id: uuid.UUID,
    user: schemas.UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return {"data": service.update_user(user_id, user)}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_endpoint(user_id: uuid.UUID, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
