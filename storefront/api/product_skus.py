import uuid
from typing import List
from fastapi import APIRouter, Depends, status

from storefront.db import schemas
from storefront.api.deps import Pagination, get_pagination, get_product_sku_service
from storefront.services.product_sku_service import ProductSkuService

router = APIRouter(prefix="/product-skus", tags=["product-skus"])


@router.get("", response_model=schemas.Page[schemas.ProductSku])
def list_product_skus_endpoint(
    pagination: Pagination = Depends(get_pagination),
    service: ProductSkuService = Depends(get_product_sku_service),
):
    return service.get_all_product_skus(pagination.page, pagination.limit)


@router.get("/product/{product_id}", response_model=schemas.Envelope[List[schemas.ProductSku]])
def list_product_skus_for_product_endpoint(
    product_id: uuid.UUID,
    service: ProductSkuService = Depends(get_product_sku_service),
):
    return {"data": service.get_product_skus_by_product_id(product_id)}


@router.get("/{sku_id}", response_model=schemas.Envelope[schemas.ProductSku])
def get_product_sku_endpoint(sku_id: uuid.UUID, service: ProductSkuService = Depends(get_product_sku_service)):
    return {"data": service.get_product_sku_by_id(sku_id)}


@router.post("", response_model=schemas.Envelope[schemas.ProductSku], status_code=status.HTTP_201_CREATED)
def create_product_sku_endpoint(
    sku: schemas.ProductSkuCreate,
    service: ProductSkuService = Depends(get_product_sku_service),
):
    return {"data": service.create_product_sku(sku)}


@router.patch("/{sku_id}", response_model=schemas.Envelope[schemas.ProductSku])
def update_product_sku_endpoint(
    sku_id: uuid.UUID,
    sku: schemas.ProductSkuUpdate,
    service: ProductSkuService = Depends(get_product_sku_service),
):
    return {"data": service.update_product_sku(sku_id, sku)}


@router.delete("/{sku_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product_sku_endpoint(sku_id: uuid.UUID, service: ProductSkuService = Depends(get_product_sku_service)):
    service.delete_product_sku(sku_id)
