"""Custom exception hierarchy for house-registry."""


class HouseRegistryError(Exception):
    """Base exception for all house-registry errors."""


class HouseNotFoundError(HouseRegistryError):
    """Raised when an operation references a house id that is not in the store."""

    def __init__(self, house_id: int, operation: str = "get") -> None:
        self.house_id = house_id
        self.operation = operation
        super().__init__(f"couldn't {operation} a house with id={house_id}. house not found")


class InvalidHouseStateError(HouseRegistryError):
    """Raised when a mutation would leave a house in an invalid state."""


class ConfigurationError(HouseRegistryError):
    """Raised when configuration is invalid or missing."""


class SinkError(HouseRegistryError):
    """Raised when a sink operation fails."""
