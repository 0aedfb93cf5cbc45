"""Sample data generators."""

from house_registry.generators.house import HousePayloadGenerator

__all__ = ["HousePayloadGenerator"]
