"""Product schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# NUMERIC(10, 2)
_PRICE = {"gt": 0, "max_digits": 10, "decimal_places": 2}


class ProductCreate(BaseModel):
    """Schema for creating a product."""

    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=10)
    price: Decimal = Field(..., **_PRICE)
    image_url: str = Field(..., min_length=1, max_length=1024, alias="imageUrl")
    is_featured: bool = Field(default=False, alias="isFeatured")

    model_config = ConfigDict(populate_by_name=True)


class ProductUpdate(BaseModel):
    """
    Schema for a sparse product update.

    Only the keys present in the request body are applied. A present key
    must satisfy the same constraints as on create and may not be null.
    """

    title: str | None = Field(default=None, min_length=3, max_length=255)
    description: str | None = Field(default=None, min_length=10)
    price: Decimal | None = Field(default=None, **_PRICE)
    image_url: str | None = Field(default=None, min_length=1, max_length=1024, alias="imageUrl")
    is_featured: bool | None = Field(default=None, alias="isFeatured")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def reject_nulls(self) -> "ProductUpdate":
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field} may not be null")
        return self


class ProductResponse(BaseModel):
    """Schema for product response."""

    id: int
    title: str
    description: str
    price: float
    image_url: str = Field(alias="imageUrl")
    is_featured: bool = Field(alias="isFeatured")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProductCreatedResponse(BaseModel):
    message: str
    product: ProductResponse


class ProductUpdatedResponse(BaseModel):
    message: str
    updated_product: ProductResponse = Field(alias="updatedProduct")

    model_config = ConfigDict(populate_by_name=True)
