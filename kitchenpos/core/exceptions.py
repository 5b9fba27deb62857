"""
Domain exceptions raised by the kitchenpos services.

Each class carries the HTTP status code it maps to; the handler registered in
``kitchenpos.main`` turns them into JSON error responses.
"""


class KitchenPosError(Exception):
    """Base exception for kitchenpos business rule violations."""

    status_code = 400
    error_code = "kitchenpos_error"

    def __init__(self, message=None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    def default_message(self):
        return "Request could not be processed"


class EntityNotFoundError(KitchenPosError):
    """Raised when a referenced entity id does not exist."""

    status_code = 404
    error_code = "not_found"
    entity_name = "entity"

    def __init__(self, entity_id=None, message=None):
        self.entity_id = entity_id
        super().__init__(message)

    def default_message(self):
        if self.entity_id is None:
            return f"{self.entity_name.capitalize()} not found"
        return f"{self.entity_name.capitalize()} {self.entity_id} not found"


class InvalidArgumentError(KitchenPosError):
    """Raised for malformed or out-of-range input."""

    status_code = 400
    error_code = "invalid_argument"


class InvalidStateError(KitchenPosError):
    """Raised when an operation conflicts with the current entity state."""

    status_code = 409
    error_code = "invalid_state"


# Not found

class MenuNotFoundError(EntityNotFoundError):
    entity_name = "menu"

    def default_message(self):
        return "Referenced menu not found"


class OrderNotFoundError(EntityNotFoundError):
    entity_name = "order"

    def default_message(self):
        return "Order not found"


class OrderTableNotFoundError(EntityNotFoundError):
    entity_name = "order table"

    def default_message(self):
        return "Table not found"


class TableGroupNotFoundError(EntityNotFoundError):
    entity_name = "table group"


# Invalid argument

class InvalidProductError(InvalidArgumentError):
    """Raised when a product has a missing or negative price, or no name."""


class InvalidMenuGroupError(InvalidArgumentError):
    """Raised when a menu group is created without a name."""


class InvalidMenuError(InvalidArgumentError):
    """Raised when a menu fails price, group or product validation."""


class InvalidOrderError(InvalidArgumentError):
    """Raised when an order has no line items or targets an empty table."""


class InvalidNumberOfGuestsError(InvalidArgumentError):
    """Raised for a negative guest count."""


class InvalidTableGroupError(InvalidArgumentError):
    """Raised when fewer than two tables are given for grouping."""


class TableGroupInUseError(InvalidArgumentError):
    """Raised when ungrouping while a member table still has an active order."""

    def default_message(self):
        return "Cannot ungroup tables while an order is cooking or being eaten"


# Invalid state

class CompletedOrderError(InvalidStateError):
    """Raised when changing the status of an order that is already COMPLETION."""

    def default_message(self):
        return "Cannot change status of a completed order"


class TableGroupedError(InvalidStateError):
    """Raised when changing the empty flag of a table that belongs to a group."""

    def default_message(self):
        return "Grouped tables cannot change empty status directly"


class TableInUseError(InvalidStateError):
    """Raised when a table with an active order cannot change its empty flag."""

    def default_message(self):
        return "Cannot change empty status of a table with a cooking or eating order"


class EmptyTableError(InvalidStateError):
    """Raised when setting the guest count of an empty table."""

    def default_message(self):
        return "Cannot set guest count on an empty table"


class TableNotGroupableError(InvalidStateError):
    """Raised when grouping a table that is occupied or already grouped."""

    def default_message(self):
        return "Cannot group non-empty or already-grouped tables"
