"""
Test configuration and fixtures.
"""
import os
import pytest
from decimal import Decimal
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Set test database URL before importing app
os.environ["DATABASE_URL"] = "sqlite://"

from kitchenpos.main import app
from kitchenpos.db.base import Base
from kitchenpos.db.session import get_db
from kitchenpos.schemas.menu import MenuProductRequest
from kitchenpos.schemas.order import OrderLineItemRequest
from kitchenpos.services.menu import MenuGroupService, MenuService
from kitchenpos.services.order import OrderService
from kitchenpos.services.product import ProductService
from kitchenpos.services.table import OrderTableService


# In-memory database, rebuilt for every test
@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Generator[Session, None, None]:
    """Create a database session for the test."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


# ============ Entity factories ============

@pytest.fixture
def make_product(db):
    def _make(name="Fried Chicken", price="16000"):
        return ProductService(db).create(name, Decimal(price))
    return _make


@pytest.fixture
def make_menu_group(db):
    def _make(name="One Chicken"):
        return MenuGroupService(db).create(name)
    return _make


@pytest.fixture
def make_menu(db, make_product, make_menu_group):
    """Menu over the given (product, quantity) pairs; defaults to one 16000 product."""
    def _make(name="Fried Chicken", price="16000", products=None, menu_group=None):
        if products is None:
            products = [(make_product(), 1)]
        if menu_group is None:
            menu_group = make_menu_group()
        return MenuService(db).create(
            name=name,
            price=Decimal(price),
            menu_group_id=menu_group.id,
            menu_products=[
                MenuProductRequest(product_id=product.id, quantity=quantity)
                for product, quantity in products
            ],
        )
    return _make


@pytest.fixture
def make_table(db):
    def _make(number_of_guests=0, empty=True):
        return OrderTableService(db).create(number_of_guests, empty)
    return _make


@pytest.fixture
def make_order(db, make_menu, make_table):
    """Order of one menu on a seated table; creates whatever is not given."""
    def _make(order_table=None, menu=None, quantity=1):
        if order_table is None:
            order_table = make_table(number_of_guests=4, empty=False)
        if menu is None:
            menu = make_menu()
        return OrderService(db).create(
            order_table.id,
            [OrderLineItemRequest(menu_id=menu.id, quantity=quantity)],
        )
    return _make
