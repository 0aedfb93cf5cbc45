"""Append-only change ledger keyed by house id."""

from dataclasses import dataclass, field

from house_registry.models import ChangeRecord, ChangeType


@dataclass
class ChangeLedger:
    """Per-house audit trail, in insertion (= chronological) order.

    Entries are kept after the house itself is deleted, so a removed
    listing's history stays queryable.
    """

    _entries: dict[int, list[ChangeRecord]] = field(default_factory=dict)

    def record(self, house_id: int, change_type: ChangeType, timestamp: int) -> ChangeRecord:
        """Append an entry for ``house_id`` and return it."""
        entry = ChangeRecord(change_type=change_type, timestamp=timestamp)
        self._entries.setdefault(house_id, []).append(entry)
        return entry

    def history(self, house_id: int) -> list[ChangeRecord]:
        """Get the full ledger for a house (empty if it never existed)."""
        return list(self._entries.get(house_id, []))

    def latest(self, house_id: int) -> ChangeRecord | None:
        """Most recent entry for a house, if any."""
        entries = self._entries.get(house_id)
        return entries[-1] if entries else None

    def tracked_ids(self) -> list[int]:
        """Ids with at least one entry, in first-seen order."""
        return list(self._entries)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())
