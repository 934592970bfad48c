"""Request/response schemas for product endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER_VALUE


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Name of the product")
    description: str = Field(default="", description="Description of the product")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Price of the product")
    stock: int = Field(
        ..., ge=0, le=MAX_INTEGER_VALUE, description="Stock count of the product"
    )


class ProductUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    stock: int | None = Field(default=None, ge=0, le=MAX_INTEGER_VALUE)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: float
    stock: int


class MessageResponse(BaseModel):
    message: str
