"""Root greeting and health check endpoints."""

from fastapi import APIRouter

from app.schemas.common import MessageResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=MessageResponse)
def root() -> dict[str, str]:
    """Greeting for anyone hitting the API root."""
    return {"message": "Welcome to the product catalog API"}


@router.get("/health")
def health_check() -> dict[str, str]:
    """Check API health status."""
    return {"status": "healthy"}
