"""House payload generator for seeding a store."""

from __future__ import annotations

from typing import Iterator

from house_registry.generators.base import BaseGenerator
from house_registry.models import HousePayload


class HousePayloadGenerator(BaseGenerator):
    """Generate synthetic house listing payloads."""

    HOUSE_TYPES = ["flat", "bungalow", "duplex", "terrace", "detached", "studio"]
    HOUSE_TYPE_WEIGHTS = [0.35, 0.15, 0.15, 0.15, 0.10, 0.10]

    # Price ranges by house type
    PRICE_RANGES = {
        "flat": (500, 5000),
        "bungalow": (1500, 9000),
        "duplex": (3000, 20000),
        "terrace": (1200, 8000),
        "detached": (5000, 40000),
        "studio": (300, 2500),
    }

    MAX_UNITS = 12

    def generate(self) -> HousePayload:
        """Generate a single payload.

        Returns
        -------
        HousePayload
            Generated payload.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[HousePayload]:
        """Generate multiple payloads.

        Parameters
        ----------
        count : int
            Number of payloads to generate.

        Yields
        ------
        HousePayload
            Generated payloads.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> HousePayload:
        house_type = self.random.choices(self.HOUSE_TYPES, weights=self.HOUSE_TYPE_WEIGHTS, k=1)[0]
        low, high = self.PRICE_RANGES[house_type]
        # Round to tens
        price = round(self.random.randint(low, high), -1)
        units = self.random.randint(0, self.MAX_UNITS)

        return HousePayload(
            owners_name=self.fake.name(),
            house_type=house_type,
            location=self.fake.city(),
            price=price,
            availabile_units=units,
            availability=units > 0,
        )
