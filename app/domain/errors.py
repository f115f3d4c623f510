# app/domain/errors.py
from uuid import UUID


class CartServiceError(Exception):
    """Base for every failure surfaced by CartService."""


class CartNotFound(CartServiceError):
    def __init__(self, cart_id: UUID):
        super().__init__(f"Shopping cart {cart_id} not found")
        self.cart_id = cart_id


class NoProductsFound(CartServiceError):
    """None of the requested product ids exist in the catalog."""

    def __init__(self, product_ids=()):
        super().__init__("No products found")
        self.product_ids = list(product_ids)


class SourceUnavailable(CartServiceError):
    """The product catalog could not be read."""


class StoreUnavailable(CartServiceError):
    """The cart store failed to read, write or delete."""
