"""Errors raised by the routing core."""


class InvalidInput(ValueError):
    """Raised when interview answers cannot form a valid TierInputs."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")
