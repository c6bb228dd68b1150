"""Common schemas shared across modules."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain informational response."""

    message: str


class FieldError(BaseModel):
    """A single validation failure, e.g. ``{"field": "body.price", ...}``."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response produced by the exception handlers."""

    detail: str
    error_type: str
    error_id: str
    errors: list[FieldError] | None = None
