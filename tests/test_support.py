"""
Tests for configuration, migrations and the demo seed script.
"""
import pytest
from pathlib import Path
from pydantic import ValidationError
from sqlalchemy import create_engine, inspect

from alembic import command
from alembic.config import Config

from kitchenpos.core.config import Settings
from kitchenpos.scripts.seed_demo import MENU_GROUPS, PRODUCTS, TABLE_COUNT, seed
from kitchenpos.services.menu import MenuGroupService, MenuService
from kitchenpos.services.product import ProductService
from kitchenpos.services.table import OrderTableService

ROOT = Path(__file__).resolve().parents[1]


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_cors_origins(self):
        settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]


class TestMigrations:

    def test_upgrade_creates_schema_and_downgrade_drops_it(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'kitchenpos.db'}"
        config = Config(str(ROOT / "alembic.ini"))
        config.set_main_option("sqlalchemy.url", url)

        command.upgrade(config, "head")

        engine = create_engine(url)
        tables = set(inspect(engine).get_table_names())
        assert {
            "products", "menu_groups", "menus", "menu_products",
            "table_groups", "order_tables", "orders", "order_line_items",
        } <= tables

        command.downgrade(config, "base")

        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
        engine.dispose()


class TestSeedDemo:

    def test_seed(self, db):
        assert seed(db) is True

        assert len(ProductService(db).list()) == len(PRODUCTS)
        assert len(MenuGroupService(db).list()) == len(MENU_GROUPS)
        assert len(MenuService(db).list()) == len(PRODUCTS)
        tables = OrderTableService(db).list()
        assert len(tables) == TABLE_COUNT
        assert all(t.empty for t in tables)

    def test_seed_is_idempotent(self, db):
        seed(db)

        assert seed(db) is False
        assert len(ProductService(db).list()) == len(PRODUCTS)
