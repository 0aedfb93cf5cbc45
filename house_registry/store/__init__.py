"""In-memory house table and its change ledger."""

from house_registry.store.houses import HouseStore
from house_registry.store.ledger import ChangeLedger

__all__ = ["ChangeLedger", "HouseStore"]
