from .product import Product
from .user import User

__all__ = [
    "Product",
    "User",
]
