"""Common sink interface."""

from typing import Any, Protocol


class Sink(Protocol):
    """Anything change events and snapshots can be written to."""

    def send(self, topic: str, record: Any, key: str | None = None) -> None: ...

    def write_batch(self, entity_type: str, records: list[Any]) -> None: ...

    def close(self) -> None: ...
