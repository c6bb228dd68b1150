"""Product CRUD endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.auth.schemas import User
from app.database.base import MAX_INTEGER_ID
from app.database.session import get_db
from app.models.product import Product
from app.schemas.product import (
    ProductCreate,
    ProductCreatedResponse,
    ProductResponse,
    ProductUpdate,
    ProductUpdatedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

# Positive integer within the id column range; anything else is a 400
ProductId = Annotated[
    int,
    Path(gt=0, le=MAX_INTEGER_ID, description="Product id (positive integer)"),
]


@router.get("", response_model=list[ProductResponse])
def list_products(db: Session = Depends(get_db)) -> list[Product]:
    """List every product."""
    return db.query(Product).order_by(Product.id).all()


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: ProductId,
    db: Session = Depends(get_db),
) -> Product:
    """Get a single product."""
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Create a product."""
    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)

    logger.info(f"User {user.id} created product {product.id}")
    return {
        "message": "Product created successfully",
        "product": ProductResponse.model_validate(product),
    }


@router.put("/{product_id}", response_model=ProductUpdatedResponse)
def update_product(
    data: ProductUpdate,
    product_id: ProductId,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Apply a sparse update: only fields present in the body change."""
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(product, field, value)

    db.commit()
    db.refresh(product)

    logger.info(f"User {user.id} updated product {product.id}: {sorted(update_data)}")
    return {
        "message": "Product updated successfully",
        "updatedProduct": ProductResponse.model_validate(product),
    }


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: ProductId,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> None:
    """
    Delete a product.

    Idempotent: responds 204 whether or not the product existed.
    """
    deleted = db.query(Product).filter(Product.id == product_id).delete()
    db.commit()

    logger.info(f"User {user.id} deleted product {product_id} (rows removed: {deleted})")
