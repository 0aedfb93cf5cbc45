"""Domain models for house listings."""

from house_registry.models.enums import ChangeType
from house_registry.models.house import ChangeRecord, House, HouseChangeEvent, HousePayload
from house_registry.models.results import Error, InvalidState, NotFound

__all__ = [
    "ChangeRecord",
    "ChangeType",
    "Error",
    "House",
    "HouseChangeEvent",
    "HousePayload",
    "InvalidState",
    "NotFound",
]
