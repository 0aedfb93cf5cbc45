"""Configuration management for house-registry."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from house_registry.exceptions import ConfigurationError

EVENT_SINKS = ("none", "console", "json", "kafka")


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    schema_registry_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class StoreConfig:
    """Query behaviour of the house store."""

    search_case_sensitive: bool = False


@dataclass
class RegistryConfig:
    """Main configuration for house-registry."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    event_sink: str = "none"
    topic_prefix: str = "dev.houses"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.event_sink not in EVENT_SINKS:
            raise ConfigurationError(
                f"Unknown event sink {self.event_sink!r}, expected one of {', '.join(EVENT_SINKS)}"
            )

    @property
    def changes_topic(self) -> str:
        """Topic that receives one message per ledger entry."""
        return f"{self.topic_prefix}.house-changes"

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            schema_registry_url=os.getenv("SCHEMA_REGISTRY_URL") or None,
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        store = StoreConfig(
            search_case_sensitive=os.getenv("SEARCH_CASE_SENSITIVE", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            kafka=kafka,
            output=output,
            store=store,
            event_sink=os.getenv("EVENT_SINK", "none").lower(),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.houses"),
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
