"""Product CRUD on top of ProductRepository with error translation."""

import logging
import math
from typing import Any

from app.models.base import MAX_INTEGER_VALUE
from app.models.product import Product
from app.repositories.products import ProductRepository
from app.services.errors import (
    InternalError,
    NotFoundError,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

# Fields a client may set on create/update.
PRODUCT_FIELDS = ("name", "description", "price", "stock")


def validate_product_fields(fields: dict[str, Any]) -> None:
    """Check the supplied product fields; raises ValidationFailed on the first bad one."""
    if "name" in fields:
        name = fields["name"]
        if not isinstance(name, str) or not name.strip():
            raise ValidationFailed("Product name must be a non-empty string")
    if "description" in fields and not isinstance(fields["description"], str):
        raise ValidationFailed("Product description must be a string")
    if "price" in fields:
        price = fields["price"]
        if (
            isinstance(price, bool)
            or not isinstance(price, (int, float))
            or not math.isfinite(price)
            or price < 0
        ):
            raise ValidationFailed("Product price must be a finite number >= 0")
    if "stock" in fields:
        stock = fields["stock"]
        if (
            isinstance(stock, bool)
            or not isinstance(stock, int)
            or not 0 <= stock <= MAX_INTEGER_VALUE
        ):
            raise ValidationFailed(
                f"Product stock must be an integer between 0 and {MAX_INTEGER_VALUE}"
            )


class ProductService:
    """Create, read, update and delete catalog products."""

    def __init__(self, products: ProductRepository) -> None:
        self.products = products

    def create(self, data: dict[str, Any]) -> Product:
        fields = {k: v for k, v in data.items() if k in PRODUCT_FIELDS}
        for required in ("name", "price", "stock"):
            if required not in fields:
                raise ValidationFailed(f"Product {required} is required")
        validate_product_fields(fields)

        try:
            product = self.products.insert(Product(**fields))
        except Exception as e:
            logger.exception("Failed to create product")
            raise InternalError("Failed to create product") from e
        logger.info("Created product id=%s", product.id)
        return product

    def list_all(self) -> list[Product]:
        try:
            return self.products.list_all()
        except Exception as e:
            logger.exception("Failed to fetch products")
            raise InternalError("Failed to fetch products") from e

    def get(self, product_id: int) -> Product:
        # Ids outside the column range were never issued.
        if not 1 <= product_id <= MAX_INTEGER_VALUE:
            raise NotFoundError(f"Product with ID {product_id} not found")
        try:
            product = self.products.find_by_id(product_id)
        except Exception as e:
            logger.exception("Failed to retrieve product id=%s", product_id)
            raise InternalError("Failed to retrieve product") from e
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def update(self, product_id: int, changes: dict[str, Any]) -> Product:
        """Merge only the supplied fields onto the stored product and save it."""
        product = self.get(product_id)
        fields = {k: v for k, v in changes.items() if k in PRODUCT_FIELDS}
        validate_product_fields(fields)

        try:
            for key, value in fields.items():
                setattr(product, key, value)
            product = self.products.update(product)
        except Exception as e:
            logger.exception("Failed to update product id=%s", product_id)
            raise InternalError("Failed to update product") from e
        logger.info("Updated product id=%s fields=%s", product_id, sorted(fields))
        return product

    def delete(self, product_id: int) -> dict[str, str]:
        product = self.get(product_id)
        try:
            self.products.delete(product)
        except Exception as e:
            logger.exception("Failed to delete product id=%s", product_id)
            raise InternalError("Failed to delete product") from e
        logger.info("Deleted product id=%s", product_id)
        return {"message": f"Product with ID {product_id} deleted successfully"}
