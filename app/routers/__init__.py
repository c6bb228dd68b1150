"""API routers."""

from app.routers import auth, health, products

__all__ = [
    "auth",
    "health",
    "products",
]
