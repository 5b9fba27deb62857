"""
Sellable products.
"""
from sqlalchemy import Column, Integer, String, Numeric

from kitchenpos.core.limits import PRICE_PRECISION, PRICE_SCALE
from kitchenpos.db.base import Base


class Product(Base):
    """A single item the kitchen can prepare, priced on its own."""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
