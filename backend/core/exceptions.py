"""
Beer stock domain errors.

Every error carries a human readable ``message``, a machine ``code`` and the
HTTP status it maps to. The mapping itself is only applied by the handlers in
``core.errors`` at the API boundary.
"""
from fastapi import status


class BeerStockError(Exception):
    """Base error for the beer stock domain."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BEER_STOCK_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateNameError(BeerStockError):
    """A beer with the same name is already registered."""

    status_code = status.HTTP_409_CONFLICT
    code = "BEER_ALREADY_REGISTERED"

    def __init__(self, name: str):
        super().__init__(f"Beer with name {name} already registered in the system")
        self.name = name


class NotFoundError(BeerStockError):
    """No beer matches the given id or name."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "BEER_NOT_FOUND"

    def __init__(self, field: str, value):
        super().__init__(f"Beer with {field} {value} not found in the system")
        self.field = field
        self.value = value


class CapacityExceededError(BeerStockError):
    """An adjustment would leave quantity outside of [0, max]."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "BEER_STOCK_EXCEEDED"

    def __init__(self, beer_id: int, requested: int, quantity: int, max_quantity: int):
        super().__init__(
            f"Beer with id {beer_id} cannot be adjusted by the requested {requested}: "
            f"stock is {quantity} and must stay between 0 and {max_quantity}"
        )
        self.beer_id = beer_id
        self.requested = requested
        self.quantity = quantity
        self.max_quantity = max_quantity
