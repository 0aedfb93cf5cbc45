"""Wire a house service from configuration."""

import logging

from house_registry.config import RegistryConfig
from house_registry.query import QueryEngine
from house_registry.service import HouseService
from house_registry.sinks import ConsoleSink, JsonFileSink, KafkaSink, Sink
from house_registry.store import HouseStore

logger = logging.getLogger(__name__)


def create_sink(config: RegistryConfig) -> Sink | None:
    """Build the change-event sink named by ``config.event_sink``."""
    if config.event_sink == "console":
        return ConsoleSink(pretty=config.output.pretty_json)
    if config.event_sink == "json":
        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    if config.event_sink == "kafka":
        return KafkaSink(config.kafka)
    return None


def build_service(config: RegistryConfig | None = None) -> HouseService:
    """Create a store, its query engine and a service around them."""
    config = config or RegistryConfig.from_env()
    store = HouseStore()
    query = QueryEngine(store, case_sensitive=config.store.search_case_sensitive)
    sink = create_sink(config)
    logger.info("House service ready (event sink: %s)", config.event_sink)
    return HouseService(store=store, query=query, sink=sink, changes_topic=config.changes_topic)
