"""In-memory house listing registry with a per-record change ledger."""

from house_registry.models import ChangeRecord, ChangeType, House, HousePayload, InvalidState, NotFound
from house_registry.query import QueryEngine
from house_registry.service import HouseService
from house_registry.store import ChangeLedger, HouseStore

__all__ = [
    "ChangeLedger",
    "ChangeRecord",
    "ChangeType",
    "House",
    "HousePayload",
    "HouseService",
    "HouseStore",
    "InvalidState",
    "NotFound",
    "QueryEngine",
]

__version__ = "0.1.0"
