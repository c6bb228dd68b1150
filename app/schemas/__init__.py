"""Pydantic schemas for API request/response validation."""

from app.schemas.common import ErrorResponse, FieldError, MessageResponse
from app.schemas.product import (
    ProductCreate,
    ProductCreatedResponse,
    ProductResponse,
    ProductUpdate,
    ProductUpdatedResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "FieldError",
    "MessageResponse",
    # Product
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductCreatedResponse",
    "ProductUpdatedResponse",
]
