"""Output sinks for change events and store snapshots."""

from house_registry.sinks.base import Sink
from house_registry.sinks.console import ConsoleSink
from house_registry.sinks.json_file import JsonFileSink
from house_registry.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink", "Sink"]
