"""Transport-agnostic service surface over the house store.

Every id-based operation returns its error as a value (``NotFound`` or
``InvalidState``) instead of raising, so callers branch on the result::

    result = service.get_house(7)
    if isinstance(result, NotFound):
        ...

Whole-table queries never fail. All calls run under one lock, so id
allocation, the table write and the ledger append of a call are seen
atomically by every other call.
"""

import logging
import threading
from typing import Callable, TypeVar

from house_registry.exceptions import HouseNotFoundError, InvalidHouseStateError
from house_registry.models import (
    ChangeRecord,
    House,
    HouseChangeEvent,
    HousePayload,
    InvalidState,
    NotFound,
)
from house_registry.query import QueryEngine
from house_registry.sinks.base import Sink
from house_registry.store import HouseStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CHANGES_TOPIC = "dev.houses.house-changes"


class HouseService:
    """House listing operations with result-level errors.

    Parameters
    ----------
    store : HouseStore | None
        Store to operate on; a fresh one is created when omitted.
    query : QueryEngine | None
        Query engine over ``store``; built with default settings when
        omitted.
    sink : Sink | None
        Receives one ``HouseChangeEvent`` per successful mutation.
    changes_topic : str
        Topic the change events are sent to.
    """

    def __init__(
        self,
        store: HouseStore | None = None,
        query: QueryEngine | None = None,
        sink: Sink | None = None,
        changes_topic: str = DEFAULT_CHANGES_TOPIC,
    ) -> None:
        self.store = store if store is not None else HouseStore()
        self.query = query if query is not None else QueryEngine(self.store)
        self.sink = sink
        self.changes_topic = changes_topic
        self._lock = threading.Lock()

    # Mutations
    def add_house(self, payload: HousePayload) -> House:
        with self._lock:
            house = self.store.add(payload)
            self._publish(house)
        logger.info("Added house %d", house.id, extra={"house_id": house.id})
        return house

    def update_house(self, house_id: int, payload: HousePayload) -> House | NotFound:
        return self._mutate(lambda: self.store.update(house_id, payload))

    def buy_house(self, house_id: int, payload: HousePayload) -> House | NotFound | InvalidState:
        return self._mutate(lambda: self.store.buy(house_id, payload))

    def set_house_availabile(self, house_id: int) -> House | NotFound:
        return self._mutate(lambda: self.store.set_availability(house_id, True))

    def set_house_not_availabile(self, house_id: int) -> House | NotFound:
        return self._mutate(lambda: self.store.set_availability(house_id, False))

    def set_price(self, house_id: int, amount: int) -> House | NotFound | InvalidState:
        return self._mutate(lambda: self.store.set_price(house_id, amount))

    def delete_house(self, house_id: int) -> House | NotFound:
        return self._mutate(lambda: self.store.delete(house_id))

    # Queries
    def get_house(self, house_id: int) -> House | NotFound:
        return self._read(lambda: self.store.get(house_id))

    def get_all_houses(self) -> list[House]:
        with self._lock:
            return self.query.all()

    def get_available_houses(self) -> list[House]:
        with self._lock:
            return self.query.available()

    def search_houses(self, text: str) -> list[House]:
        with self._lock:
            return self.query.search_by_text(text)

    def search_price(self, amount: int) -> list[House]:
        """Houses priced exactly at ``amount``."""
        with self._lock:
            return self.query.search_by_price(amount)

    def search_price_range(self, low: int | None = None, high: int | None = None) -> list[House]:
        with self._lock:
            return self.query.search_by_price_range(low, high)

    def sort_house_by_name(self) -> list[House]:
        with self._lock:
            return self.query.sort_by_name()

    def house_availability(self, house_id: int) -> bool | NotFound:
        return self._read(lambda: self.query.availability_of(house_id))

    def get_house_update_history(self, house_id: int) -> list[ChangeRecord]:
        """Full ledger of a house; empty for ids that never existed."""
        with self._lock:
            return self.store.history(house_id)

    def export_snapshot(self, sink: Sink) -> dict[str, int]:
        """Write every house and every ledger entry to ``sink`` as batches.

        Returns
        -------
        dict[str, int]
            Number of records written per entity type.
        """
        with self._lock:
            houses = self.store.snapshot()
            ledger = [
                {"house_id": house_id, "change_type": record.change_type, "timestamp": record.timestamp}
                for house_id in self.store.ledger.tracked_ids()
                for record in self.store.history(house_id)
            ]
        sink.write_batch("houses", houses)
        sink.write_batch("house_ledger", ledger)
        logger.info("Exported %d houses and %d ledger entries", len(houses), len(ledger))
        return {"houses": len(houses), "house_ledger": len(ledger)}

    def _mutate(self, operation: Callable[[], House]) -> House | NotFound | InvalidState:
        with self._lock:
            try:
                house = operation()
            except HouseNotFoundError as exc:
                logger.warning("%s", exc, extra={"house_id": exc.house_id, "operation": exc.operation})
                return NotFound(msg=str(exc))
            except InvalidHouseStateError as exc:
                logger.warning("%s", exc)
                return InvalidState(msg=str(exc))
            self._publish(house)
        return house

    def _read(self, operation: Callable[[], T]) -> T | NotFound:
        with self._lock:
            try:
                return operation()
            except HouseNotFoundError as exc:
                return NotFound(msg=str(exc))

    def _publish(self, house: House) -> None:
        """Send the latest ledger entry of ``house`` to the sink, if any.

        Runs after the mutation is committed. A sink failure is logged and
        the committed record is still returned to the caller.
        """
        if self.sink is None:
            return
        record = self.store.latest_change(house.id)
        event = HouseChangeEvent.from_change(house, record)
        try:
            self.sink.send(self.changes_topic, event, key=str(house.id))
        except Exception:
            logger.exception(
                "Failed to publish %s of house %d",
                record.change_type.value,
                house.id,
                extra={"house_id": house.id, "change_type": record.change_type.value},
            )
            return
        logger.debug(
            "Published %s for house %d",
            record.change_type.value,
            house.id,
            extra={"house_id": house.id, "change_type": record.change_type.value},
        )
