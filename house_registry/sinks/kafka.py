"""Kafka sink for publishing house change events to Kafka topics."""

import json
import logging
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from typing import Any

from confluent_kafka import Producer
from confluent_kafka.serialization import MessageField, SerializationContext

from house_registry.config import KafkaConfig
from house_registry.exceptions import SinkError
from house_registry.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

SCHEMA_NAMESPACE = "com.houseregistry"

_HOUSE_FIELDS = [
    {"name": "owners_name", "type": "string"},
    {"name": "house_type", "type": "string"},
    {"name": "location", "type": "string"},
    {"name": "price", "type": "long"},
    {"name": "availabile_units", "type": "long"},
    {"name": "availability", "type": "boolean"},
    {"name": "created_at", "type": "long"},
    {"name": "updated_at", "type": ["null", "long"], "default": None},
]

# Avro schemas keyed by entity type (last topic segment, dashes as underscores)
AVRO_SCHEMAS = {
    "house_changes": {
        "type": "record",
        "name": "HouseChangeEvent",
        "namespace": SCHEMA_NAMESPACE,
        "fields": [
            {"name": "house_id", "type": "long"},
            {"name": "change_type", "type": "string"},
            {"name": "timestamp", "type": "long"},
            *_HOUSE_FIELDS,
        ],
    },
    "houses": {
        "type": "record",
        "name": "House",
        "namespace": SCHEMA_NAMESPACE,
        "fields": [{"name": "id", "type": "long"}, *_HOUSE_FIELDS],
    },
}


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Output change events and snapshots to Kafka topics."""

    # Entity type to key field mapping
    KEY_FIELDS = {
        "house_changes": "house_id",
        "houses": "id",
        "house_ledger": "house_id",
    }

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()
        self._avro_serializers: dict[str, Any] = {}

        # Initialize Avro serializers if Schema Registry is configured
        if config.schema_registry_url:
            self._init_avro_serializers()

    def _init_avro_serializers(self) -> None:
        """Initialize Avro serializers for each entity type."""
        try:
            from confluent_kafka.schema_registry import SchemaRegistryClient
            from confluent_kafka.schema_registry.avro import AvroSerializer

            schema_registry_client = SchemaRegistryClient({"url": self.config.schema_registry_url})

            for entity_type, schema in AVRO_SCHEMAS.items():
                self._avro_serializers[entity_type] = AvroSerializer(
                    schema_registry_client,
                    json.dumps(schema),
                    to_dict=self._to_avro_dict,
                )
            logger.info("Avro serializers initialized for: %s", list(AVRO_SCHEMAS.keys()))
        except ImportError:
            logger.warning(
                "confluent-kafka[avro] not installed. Using JSON serialization. "
                "Install with: pip install 'confluent-kafka[avro]'"
            )

    def _to_avro_dict(self, obj: Any, ctx: SerializationContext) -> dict:
        """Convert object to Avro-compatible dict."""
        if is_dataclass(obj):
            data = asdict(obj)
        elif isinstance(obj, dict):
            data = obj
        else:
            raise ValueError(f"Cannot convert {type(obj)} to Avro dict")

        return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def _get_key(self, entity_type: str, record: Any) -> str | None:
        """Extract message key from record based on entity type."""
        key_field = self.KEY_FIELDS.get(entity_type)
        if not key_field:
            return None

        if is_dataclass(record):
            value = getattr(record, key_field, None)
        elif isinstance(record, dict):
            value = record.get(key_field)
        else:
            return None
        return None if value is None else str(value)

    def _get_entity_type(self, topic: str) -> str:
        """Extract entity type from topic name."""
        # dev.houses.house-changes -> house_changes
        return topic.split(".")[-1].replace("-", "_")

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to Kafka topic."""
        entity_type = self._get_entity_type(topic)

        if entity_type in self._avro_serializers:
            serializer = self._avro_serializers[entity_type]
            value = serializer(record, SerializationContext(topic, MessageField.VALUE))
        else:
            value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(entity_type, record)

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except BufferError as exc:
            self.stats.failed += 1
            raise SinkError(f"Producer queue full, could not send to {topic}") from exc
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic."""
        logger.info("Writing batch to %s: %d records", topic, len(records))

        for record in records:
            self.send(topic, record)

        self.flush()
        logger.info(
            "Batch complete: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
