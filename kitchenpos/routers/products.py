"""
Products router.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.product import ProductCreate, ProductResponse
from kitchenpos.services.product import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    request: ProductCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """Register a product. Price must be present and not negative."""
    product = ProductService(db).create(request.name, request.price)
    response.headers["Location"] = f"/api/products/{product.id}"
    return ProductResponse.model_validate(product)


@router.get("", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    products = ProductService(db).list()
    return [ProductResponse.model_validate(p) for p in products]
