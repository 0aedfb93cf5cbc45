"""House listing models."""

from dataclasses import dataclass

from house_registry.models.enums import ChangeType


@dataclass
class HousePayload:
    """Caller-supplied house fields (everything but id and timestamps)."""

    owners_name: str
    house_type: str
    location: str
    price: int
    availabile_units: int
    availability: bool

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")
        if self.availabile_units < 0:
            raise ValueError(f"availabile_units must be non-negative, got {self.availabile_units}")


@dataclass
class House:
    """Listing record owned by the store."""

    id: int
    owners_name: str
    house_type: str
    location: str
    price: int
    availabile_units: int
    availability: bool
    created_at: int  # ns since epoch
    updated_at: int | None = None

    def payload(self) -> HousePayload:
        """Mutable fields of this house as a payload."""
        return HousePayload(
            owners_name=self.owners_name,
            house_type=self.house_type,
            location=self.location,
            price=self.price,
            availabile_units=self.availabile_units,
            availability=self.availability,
        )


@dataclass(frozen=True)
class ChangeRecord:
    """One audit entry in a house's ledger."""

    change_type: ChangeType
    timestamp: int


@dataclass
class HouseChangeEvent:
    """Flat, publishable view of one ledger entry and the house it touched."""

    house_id: int
    change_type: ChangeType
    timestamp: int
    owners_name: str
    house_type: str
    location: str
    price: int
    availabile_units: int
    availability: bool
    created_at: int
    updated_at: int | None = None

    @classmethod
    def from_change(cls, house: House, record: ChangeRecord) -> "HouseChangeEvent":
        """Build an event from a house state and the entry it produced."""
        return cls(
            house_id=house.id,
            change_type=record.change_type,
            timestamp=record.timestamp,
            owners_name=house.owners_name,
            house_type=house.house_type,
            location=house.location,
            price=house.price,
            availabile_units=house.availabile_units,
            availability=house.availability,
            created_at=house.created_at,
            updated_at=house.updated_at,
        )
