"""Initial schema for products, menus, tables, table groups and orders

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Catalog
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
    )

    op.create_table(
        'menu_groups',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    op.create_table(
        'menus',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
        sa.Column('menu_group_id', sa.Integer(), sa.ForeignKey('menu_groups.id'), nullable=False),
    )

    op.create_table(
        'menu_products',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('menu_id', sa.Integer(), sa.ForeignKey('menus.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('quantity', sa.BigInteger(), nullable=False),
    )

    # Tables
    op.create_table(
        'table_groups',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_date', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'order_tables',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('table_group_id', sa.Integer(), sa.ForeignKey('table_groups.id'), nullable=True),
        sa.Column('number_of_guests', sa.Integer(), nullable=False),
        sa.Column('empty', sa.Boolean(), nullable=False),
    )

    # Orders
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_table_id', sa.Integer(), sa.ForeignKey('order_tables.id'), nullable=False),
        sa.Column('order_status', sa.String(255), nullable=False),
        sa.Column('ordered_time', sa.DateTime(), nullable=False),
    )
    op.create_index('idx_orders_table_status', 'orders', ['order_table_id', 'order_status'])

    op.create_table(
        'order_line_items',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('menu_id', sa.Integer(), sa.ForeignKey('menus.id'), nullable=False),
        sa.Column('quantity', sa.BigInteger(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('order_line_items')
    op.drop_index('idx_orders_table_status', table_name='orders')
    op.drop_table('orders')
    op.drop_table('order_tables')
    op.drop_table('table_groups')
    op.drop_table('menu_products')
    op.drop_table('menus')
    op.drop_table('menu_groups')
    op.drop_table('products')
