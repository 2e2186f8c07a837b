"""
Products API endpoints.

CRUD plus add/remove operations on a product's resolution -> URL image map.
"""
import uuid
from fastapi import APIRouter, Depends, status

from storefront.db import schemas
from storefront.api.deps import Pagination, get_pagination, get_product_service
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=schemas.Page[schemas.Product])
def list_products_endpoint(
    pagination: Pagination = Depends(get_pagination),
    service: ProductService = Depends(get_product_service),
):
    return service.get_all_products(pagination.page, pagination.limit)


@router.get("/{product_id}", response_model=schemas.Envelope[schemas.Product])
def get_product_endpoint(product_id: uuid.UUID, service: ProductService = Depends(get_product_service)):
    return {"data": service.get_product_by_id(product_id)}


@router.post("", response_model=schemas.Envelope[schemas.Product], status_code=status.HTTP_201_CREATED)
def create_product_endpoint(
    product: schemas.ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return {"data": service.create_product(product)}


@router.patch("/{product_id}", response_model=schemas.Envelope[schemas.Product])
def update_product_endpoint(
    product_id: uuid.UUID,
    product: schemas.ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return {"data": service.update_product(product_id, product)}


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product_endpoint(product_id: uuid.UUID, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)


@router.post("/{product_id}/images", response_model=schemas.Envelope[schemas.Product])
def add_product_images_endpoint(
    product_id: uuid.UUID,
    body: schemas.ProductImagesAdd,
    service: ProductService = Depends(get_product_service),
):
    return {"data": service.add_images(product_id, body.images)}


@router.delete("/{product_id}/images", response_model=schemas.Envelope[schemas.Product])
def delete_product_image_endpoint(
    product_id: uuid.UUID,
    body: schemas.ProductImageDelete,
    service: ProductService = Depends(get_product_service),
):
    return {"data": service.delete_image(product_id, body.resolution)}
