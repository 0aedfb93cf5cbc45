"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path

import pytest

from house_registry.config import KafkaConfig, OutputConfig, RegistryConfig, StoreConfig
from house_registry.exceptions import ConfigurationError
from house_registry.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "KAFKA_BOOTSTRAP_SERVERS",
    "KAFKA_ACKS",
    "SCHEMA_REGISTRY_URL",
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "SEARCH_CASE_SENSITIVE",
    "EVENT_SINK",
    "TOPIC_PREFIX",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any house-registry variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestKafkaConfig:
    """Tests for KafkaConfig."""

    def test_default_values(self) -> None:
        config = KafkaConfig()

        assert config.bootstrap_servers == "localhost:9092"
        assert config.acks == "all"
        assert config.compression == "snappy"
        assert config.schema_registry_url is None

    def test_to_dict(self) -> None:
        result = KafkaConfig(bootstrap_servers="kafka:9092", retries=5).to_dict()

        assert result["bootstrap.servers"] == "kafka:9092"
        assert result["acks"] == "all"
        assert result["batch.size"] == 16384
        assert result["linger.ms"] == 5
        assert result["compression.type"] == "snappy"
        assert result["retries"] == 5
        assert "schema_registry_url" not in result


class TestRegistryConfig:
    """Tests for RegistryConfig."""

    def test_default_values(self) -> None:
        config = RegistryConfig()

        assert isinstance(config.kafka, KafkaConfig)
        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.store, StoreConfig)
        assert config.store.search_case_sensitive is False
        assert config.event_sink == "none"
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.changes_topic == "dev.houses.house-changes"

    def test_unknown_sink_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown event sink"):
            RegistryConfig(event_sink="carrier-pigeon")

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = RegistryConfig.from_env()

        assert config.kafka.bootstrap_servers == "localhost:9092"
        assert config.kafka.schema_registry_url is None
        assert config.output.json_output_dir == Path("output")
        assert config.output.pretty_json is False
        assert config.event_sink == "none"
        assert config.seed is None

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("KAFKA_BOOTSTRAP_SERVERS", "kafka-cluster:9092")
        clean_env.setenv("KAFKA_ACKS", "1")
        clean_env.setenv("SCHEMA_REGISTRY_URL", "http://registry:8081")
        clean_env.setenv("OUTPUT_DIR", "/data/output")
        clean_env.setenv("PRETTY_JSON", "true")
        clean_env.setenv("SEARCH_CASE_SENSITIVE", "TRUE")
        clean_env.setenv("EVENT_SINK", "Kafka")
        clean_env.setenv("TOPIC_PREFIX", "prod.houses")
        clean_env.setenv("SEED", "12345")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = RegistryConfig.from_env()

        assert config.kafka.bootstrap_servers == "kafka-cluster:9092"
        assert config.kafka.acks == "1"
        assert config.kafka.schema_registry_url == "http://registry:8081"
        assert config.output.json_output_dir == Path("/data/output")
        assert config.output.pretty_json is True
        assert config.store.search_case_sensitive is True
        assert config.event_sink == "kafka"
        assert config.changes_topic == "prod.houses.house-changes"
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_bad_seed(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SEED", "abc")
        with pytest.raises(ConfigurationError, match="SEED"):
            RegistryConfig.from_env()

    def test_from_env_bad_sink(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("EVENT_SINK", "s3")
        with pytest.raises(ConfigurationError):
            RegistryConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_standard_format(self) -> None:
        setup_logging(level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("house_registry").level == logging.DEBUG

    def test_json_format(self) -> None:
        setup_logging(level="INFO", format_type="json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_invalid_level_defaults_to_info(self) -> None:
        setup_logging(level="NOPE")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_external_libraries(self) -> None:
        setup_logging(level="DEBUG")
        assert logging.getLogger("confluent_kafka").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord(
            name="house_registry.service",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="house %d missing",
            args=(7,),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "house_registry.service"
        assert data["message"] == "house 7 missing"
        assert "timestamp" in data
        assert "house_id" not in data

    def test_extra_fields(self) -> None:
        data = json.loads(JsonFormatter().format(self._record(house_id=7, operation="delete")))
        assert data["house_id"] == 7
        assert data["operation"] == "delete"

    def test_exception(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: bad" in data["exception"]


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("house_registry.test")
        assert logger.name == "house_registry.test"
