"""Domain errors raised at the data-entry boundary."""


class InvalidInputError(ValueError):
    """Raised when user-supplied values cannot be accepted."""


class ProductNotFoundError(LookupError):
    """Raised when a product id does not exist in the store."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id
