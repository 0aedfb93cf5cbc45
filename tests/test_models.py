"""Tests for domain models."""

import dataclasses

import pytest

from house_registry.models import (
    ChangeRecord,
    ChangeType,
    House,
    HouseChangeEvent,
    HousePayload,
    InvalidState,
    NotFound,
)


class TestHousePayload:
    """Tests for HousePayload."""

    def test_creation(self, alice_payload: HousePayload) -> None:
        assert alice_payload.owners_name == "Alice"
        assert alice_payload.price == 1000
        assert alice_payload.availability is True

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValueError, match="price"):
            HousePayload("A", "flat", "Lagos", price=-1, availabile_units=1, availability=True)

    def test_negative_units_rejected(self) -> None:
        with pytest.raises(ValueError, match="availabile_units"):
            HousePayload("A", "flat", "Lagos", price=1, availabile_units=-1, availability=False)

    def test_zero_values_allowed(self) -> None:
        payload = HousePayload("A", "flat", "Lagos", price=0, availabile_units=0, availability=False)
        assert payload.price == 0


class TestHouse:
    """Tests for House."""

    def test_updated_at_defaults_to_none(self) -> None:
        house = House(1, "A", "flat", "Lagos", 10, 1, True, created_at=5)
        assert house.updated_at is None

    def test_payload_roundtrip(self, alice_payload: HousePayload) -> None:
        house = House(id=1, created_at=5, **dataclasses.asdict(alice_payload))
        assert house.payload() == alice_payload


class TestChangeRecord:
    """Tests for ChangeRecord."""

    def test_is_frozen(self) -> None:
        record = ChangeRecord(ChangeType.CREATION, 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.timestamp = 20  # type: ignore[misc]

    def test_change_type_values(self) -> None:
        assert ChangeType.CREATION == "Creation"
        assert ChangeType.PRICE_CHANGE.value == "PriceChange"
        assert len(ChangeType) == 6


class TestHouseChangeEvent:
    """Tests for HouseChangeEvent."""

    def test_from_change(self) -> None:
        house = House(4, "Ada", "studio", "Kano", 300, 1, True, created_at=10, updated_at=20)
        event = HouseChangeEvent.from_change(house, ChangeRecord(ChangeType.UPDATE, 20))

        assert event.house_id == 4
        assert event.change_type == ChangeType.UPDATE
        assert event.timestamp == 20
        assert event.location == "Kano"
        assert event.updated_at == 20


class TestResults:
    """Tests for result-level error kinds."""

    def test_not_found_carries_message(self) -> None:
        assert NotFound(msg="missing").msg == "missing"

    def test_equality(self) -> None:
        assert InvalidState("x") == InvalidState("x")
        assert NotFound("x") != InvalidState("x")
