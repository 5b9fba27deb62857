"""
Declarative base shared by all kitchenpos models.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
