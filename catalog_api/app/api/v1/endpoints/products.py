"""
Product endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.dependencies import get_product_service
from catalog_api.app.schemas.product import Product, ProductCreate, ProductUpdate
from catalog_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("/", response_model=List[Product])
def list_products(service: ProductService = Depends(get_product_service)) -> List[Product]:
    return service.list_all()


@router.get("/categories", response_model=List[str])
def list_categories(service: ProductService = Depends(get_product_service)) -> List[str]:
    """Return the categories that currently hold at least one product."""
    return service.list_categories()


@router.get("/category/{category}", response_model=List[Product])
def list_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
) -> List[Product]:
    return service.list_by_category(category)


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)) -> Product:
    return service.get_by_id(product_id)


@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(product_in: ProductCreate, service: ProductService = Depends(get_product_service)) -> Product:
    return service.create(Product(**product_in.model_dump()))


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    product_in: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.update(product_id, product_in.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)) -> None:
    service.delete(product_id)
    return None
