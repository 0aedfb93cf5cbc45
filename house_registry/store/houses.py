"""House table with id allocation, timestamps and audit ledger."""

import logging
from dataclasses import dataclass, field, replace

from house_registry.clock import Clock, IdAllocator
from house_registry.exceptions import HouseNotFoundError, InvalidHouseStateError
from house_registry.models import ChangeRecord, ChangeType, House, HousePayload
from house_registry.store.ledger import ChangeLedger

logger = logging.getLogger(__name__)


@dataclass
class HouseStore:
    """In-memory store owning every house record and its change history.

    Records handed to callers are copies; the stored instances are only
    replaced through the mutation methods below. Each mutation validates
    before touching the table, then writes the new record and appends one
    ledger entry stamped with the record's new ``updated_at``.
    """

    clock: Clock = field(default_factory=Clock)
    ids: IdAllocator = field(default_factory=IdAllocator)
    ledger: ChangeLedger = field(default_factory=ChangeLedger)

    _houses: dict[int, House] = field(default_factory=dict)

    def add(self, payload: HousePayload) -> House:
        """Create a house from a payload."""
        now = self.clock.now()
        house = House(
            id=self.ids.next(),
            owners_name=payload.owners_name,
            house_type=payload.house_type,
            location=payload.location,
            price=payload.price,
            availabile_units=payload.availabile_units,
            availability=payload.availability,
            created_at=now,
        )
        self._commit(house, ChangeType.CREATION, now)
        return replace(house)

    def get(self, house_id: int) -> House:
        """Get a copy of a house by id."""
        return replace(self._require(house_id, "get"))

    def update(self, house_id: int, payload: HousePayload) -> House:
        """Overwrite every mutable field of a house."""
        current = self._require(house_id, "update")
        now = self.clock.now()
        house = replace(
            current,
            owners_name=payload.owners_name,
            house_type=payload.house_type,
            location=payload.location,
            price=payload.price,
            availabile_units=payload.availabile_units,
            availability=payload.availability,
            updated_at=now,
        )
        self._commit(house, ChangeType.UPDATE, now)
        return replace(house)

    def buy(self, house_id: int, payload: HousePayload) -> House:
        """Apply a purchase: payload fields, one unit fewer, availability recomputed.

        Raises
        ------
        InvalidHouseStateError
            If the payload offers no unit to buy. Nothing is changed.
        """
        current = self._require(house_id, "buy")
        if payload.availabile_units < 1:
            raise InvalidHouseStateError(
                f"couldn't buy a house with id={house_id}. no units available"
            )

        remaining = payload.availabile_units - 1
        now = self.clock.now()
        house = replace(
            current,
            owners_name=payload.owners_name,
            house_type=payload.house_type,
            location=payload.location,
            price=payload.price,
            availabile_units=remaining,
            availability=remaining > 0,
            updated_at=now,
        )
        self._commit(house, ChangeType.PURCHASE, now)
        return replace(house)

    def set_availability(self, house_id: int, available: bool) -> House:
        """Set the availability flag."""
        current = self._require(house_id, "set availability of")
        now = self.clock.now()
        house = replace(current, availability=available, updated_at=now)
        self._commit(house, ChangeType.AVAILABILITY_CHANGE, now)
        return replace(house)

    def set_price(self, house_id: int, price: int) -> House:
        """Set the price."""
        current = self._require(house_id, "set price of")
        if price < 0:
            raise InvalidHouseStateError(
                f"couldn't set price of a house with id={house_id}. price must be non-negative, got {price}"
            )
        now = self.clock.now()
        house = replace(current, price=price, updated_at=now)
        self._commit(house, ChangeType.PRICE_CHANGE, now)
        return replace(house)

    def delete(self, house_id: int) -> House:
        """Remove a house and return it as it was just before removal.

        The ledger is kept; its last entry for the id is the deletion.
        """
        self._require(house_id, "delete")
        house = self._houses.pop(house_id)
        self.ledger.record(house_id, ChangeType.DELETION, self.clock.now())
        logger.debug("Deleted house %d", house_id)
        return replace(house)

    def history(self, house_id: int) -> list[ChangeRecord]:
        """Get the change history of a house (empty if it never existed)."""
        return self.ledger.history(house_id)

    def latest_change(self, house_id: int) -> ChangeRecord | None:
        """Most recent ledger entry for a house."""
        return self.ledger.latest(house_id)

    def snapshot(self) -> list[House]:
        """Copies of every stored house, in insertion order."""
        return [replace(house) for house in self._houses.values()]

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "houses": len(self._houses),
            "available": sum(1 for house in self._houses.values() if house.availability),
            "changes": len(self.ledger),
            "last_id": self.ids.peek(),
        }

    def __len__(self) -> int:
        return len(self._houses)

    def __contains__(self, house_id: object) -> bool:
        return house_id in self._houses

    def _require(self, house_id: int, operation: str) -> House:
        house = self._houses.get(house_id)
        if house is None:
            raise HouseNotFoundError(house_id, operation)
        return house

    def _commit(self, house: House, change_type: ChangeType, timestamp: int) -> None:
        self._houses[house.id] = house
        self.ledger.record(house.id, change_type, timestamp)
        logger.debug("House %d: %s", house.id, change_type.value)
