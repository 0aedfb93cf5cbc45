"""Read-only views over a house store."""

from house_registry.exceptions import HouseNotFoundError
from house_registry.models import House
from house_registry.store import HouseStore


class QueryEngine:
    """Filter, search and sort houses.

    Holds no state of its own: every call works on a fresh snapshot of the
    store, so results are copies and never reflect later mutations.

    Parameters
    ----------
    store : HouseStore
        Store to read from.
    case_sensitive : bool
        Whether ``search_by_text`` compares text exactly (default: ignore
        case).
    """

    TEXT_FIELDS = ("location", "owners_name", "house_type")

    def __init__(self, store: HouseStore, case_sensitive: bool = False) -> None:
        self.store = store
        self.case_sensitive = case_sensitive

    def all(self) -> list[House]:
        """Every house, in insertion order."""
        return self.store.snapshot()

    def available(self) -> list[House]:
        """Houses whose availability flag is set."""
        return [house for house in self.store.snapshot() if house.availability]

    def search_by_text(self, query: str) -> list[House]:
        """Houses where ``query`` is a substring of any text field.

        An empty query matches every house.
        """
        needle = query if self.case_sensitive else query.casefold()
        matches = []
        for house in self.store.snapshot():
            for name in self.TEXT_FIELDS:
                value = getattr(house, name)
                if not self.case_sensitive:
                    value = value.casefold()
                if needle in value:
                    matches.append(house)
                    break
        return matches

    def search_by_price(self, amount: int) -> list[House]:
        """Houses priced at exactly ``amount``."""
        return [house for house in self.store.snapshot() if house.price == amount]

    def search_by_price_range(self, low: int | None = None, high: int | None = None) -> list[House]:
        """Houses with ``low <= price <= high``; a missing bound is open."""
        return [
            house
            for house in self.store.snapshot()
            if (low is None or house.price >= low) and (high is None or house.price <= high)
        ]

    def sort_by_name(self) -> list[House]:
        """All houses ordered by owner name, ties broken by id."""
        return sorted(self.store.snapshot(), key=lambda house: (house.owners_name, house.id))

    def availability_of(self, house_id: int) -> bool:
        """Availability flag of one house.

        Raises
        ------
        HouseNotFoundError
            If the id is not in the store.
        """
        if house_id not in self.store:
            raise HouseNotFoundError(house_id, "check availability of")
        return self.store.get(house_id).availability
