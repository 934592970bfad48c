"""Product CRUD. Reads need any signed-in user; writes need the admin role."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user, get_product_service, require_admin
from app.models.product import Product
from app.schemas.auth import CurrentUser
from app.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.services.products import ProductService

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    products: Annotated[ProductService, Depends(get_product_service)],
) -> Product:
    """Create a new product (admin only)."""
    return products.create(body.model_dump())


@router.get("", response_model=list[ProductResponse])
def list_products(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    products: Annotated[ProductService, Depends(get_product_service)],
) -> list[Product]:
    return products.list_all()


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    products: Annotated[ProductService, Depends(get_product_service)],
) -> Product:
    return products.get(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    body: ProductUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    products: Annotated[ProductService, Depends(get_product_service)],
) -> Product:
    """Update a product (admin only). Fields left out of the body keep their values."""
    return products.update(product_id, body.model_dump(exclude_unset=True))


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    products: Annotated[ProductService, Depends(get_product_service)],
) -> dict[str, str]:
    """Delete a product (admin only)."""
    return products.delete(product_id)
