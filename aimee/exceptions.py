"""Error types raised by Aimee services."""


class AimeeError(Exception):
    """Base class for application errors."""


class WineValidationError(AimeeError):
    """Raised when a wine payload is missing or has malformed required fields."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing or invalid fields: {', '.join(fields)}")


class WineNotFoundError(AimeeError):
    """Raised when no wine exists with the requested id."""

    def __init__(self, wine_id: int) -> None:
        self.wine_id = wine_id
        super().__init__(f"Wine with ID {wine_id} not found")


class ServiceError(AimeeError):
    """Raised when an external provider call is required and did not succeed."""
