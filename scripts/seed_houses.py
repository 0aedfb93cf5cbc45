#!/usr/bin/env python3
"""Seed a house registry with generated listings and export a snapshot.

Builds a service from environment configuration (see ``RegistryConfig``),
adds generated houses, optionally simulates purchases and price changes,
then writes every house and ledger entry to the chosen sink.
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from house_registry.app import build_service, create_sink
from house_registry.config import RegistryConfig
from house_registry.generators import HousePayloadGenerator
from house_registry.logging import get_logger, setup_logging
from house_registry.models import InvalidState
from house_registry.service import HouseService

logger = get_logger("seed_houses")


def seed(service: HouseService, generator: HousePayloadGenerator, count: int) -> list[int]:
    """Add ``count`` generated houses and return their ids."""
    ids = []
    for payload in generator.generate_batch(count):
        ids.append(service.add_house(payload).id)
    logger.info("Seeded %d houses (ids %d..%d)", count, ids[0] if ids else 0, ids[-1] if ids else 0)
    return ids


def simulate_activity(
    service: HouseService,
    generator: HousePayloadGenerator,
    ids: list[int],
    purchases: int,
    price_changes: int,
) -> dict[str, int]:
    """Run random purchases and price changes against existing houses."""
    counts = {"purchases": 0, "rejected_purchases": 0, "price_changes": 0}
    if not ids:
        return counts

    for _ in range(purchases):
        house_id = generator.random.choice(ids)
        current = service.get_house(house_id)
        result = service.buy_house(house_id, current.payload())
        if isinstance(result, InvalidState):
            counts["rejected_purchases"] += 1
        else:
            counts["purchases"] += 1

    for _ in range(price_changes):
        house_id = generator.random.choice(ids)
        current = service.get_house(house_id)
        delta = generator.random.randint(-10, 10) * 50
        service.set_price(house_id, max(0, current.price + delta))
        counts["price_changes"] += 1

    return counts


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed a house registry with sample listings")
    parser.add_argument(
        "--houses",
        type=int,
        default=50,
        help="Number of houses to generate (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED env or none)",
    )
    parser.add_argument(
        "--purchases",
        type=int,
        default=0,
        help="Number of random purchases to simulate (default: 0)",
    )
    parser.add_argument(
        "--price-changes",
        type=int,
        default=0,
        help="Number of random price changes to simulate (default: 0)",
    )
    parser.add_argument(
        "--export",
        type=str,
        choices=["console", "json", "kafka"],
        default="json",
        help="Sink for the final snapshot (default: json)",
    )
    args = parser.parse_args()

    config = RegistryConfig.from_env()
    setup_logging(config.log_level, config.log_format)
    seed_value = args.seed if args.seed is not None else config.seed

    start = time.perf_counter()
    service = build_service(config)
    generator = HousePayloadGenerator(seed=seed_value)

    ids = seed(service, generator, args.houses)
    counts = simulate_activity(service, generator, ids, args.purchases, args.price_changes)
    logger.info("Activity: %s", counts)

    export_config = RegistryConfig(
        kafka=config.kafka,
        output=config.output,
        event_sink=args.export,
        topic_prefix=config.topic_prefix,
    )
    sink = create_sink(export_config)
    try:
        written = service.export_snapshot(sink)
    finally:
        sink.close()
        if service.sink is not None:
            service.sink.close()

    logger.info("Summary: %s", service.store.summary())
    logger.info("Exported %s in %.2fs", written, time.perf_counter() - start)


if __name__ == "__main__":
    main()
