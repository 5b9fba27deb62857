import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from kitchenpos.core.exceptions import InvalidProductError
from kitchenpos.core.limits import fits_price_column
from kitchenpos.models.product import Product
from kitchenpos.repositories.catalog import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Registers and lists sellable products."""

    def __init__(self, db: Session):
        self.db = db
        self.products = ProductRepository(db)

    def create(self, name: str, price: Optional[Decimal]) -> Product:
        if price is None or price < 0:
            raise InvalidProductError("Product price must be zero or greater")
        if not fits_price_column(price):
            raise InvalidProductError("Product price must have at most 2 decimal places and 17 integer digits")
        if not name or not name.strip():
            raise InvalidProductError("Product name is required")

        product = self.products.save(Product(name=name, price=price))
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"Created product {product.id} ({product.name}) at {product.price}")
        return product

    def list(self) -> List[Product]:
        return self.products.find_all()
