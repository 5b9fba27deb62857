"""kitchenpos: restaurant point-of-sale API."""

__version__ = "0.1.0"
