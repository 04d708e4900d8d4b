"""Tests for the metrics registry and prometheus_client bridge"""
from unittest.mock import Mock

import pytest
from prometheus_client.parser import text_string_to_metric_families

from collectors.pingdom import PingdomCollector
from config import Config
from metrics.exporters.prometheus import PrometheusCollectorAdapter, group_samples
from metrics.registry import MetricsRegistry
from upstream.client import PingdomAPIError
from upstream.models import Check


CHECK = Check(id=1, name="A", hostname="a.com", status="up", last_response_time=120, resolution=5)


def parse(content: bytes):
    return {family.name: family for family in text_string_to_metric_families(content.decode())}


class TestMetricsRegistry:
    """Test registration and rendering"""

    def setup_method(self):
        """Setup test fixtures"""
        self.config = Config(
            pingdom_username="user",
            pingdom_password="pass",
            pingdom_api_key="key",
            enable_process_metrics=False
        )
        self.client = Mock()
        self.registry = MetricsRegistry(self.config)

    def test_register_does_not_scrape(self):
        """Test registration only uses descriptors"""
        self.registry.register_collector(PingdomCollector(self.client))

        self.client.list_checks.assert_not_called()
        assert self.registry.list_collectors() == ["pingdom"]

    def test_register_rejects_non_collectors(self):
        """Test only BaseCollector instances are accepted"""
        with pytest.raises(ValueError):
            self.registry.register_collector(object())

    def test_register_rejects_duplicates(self):
        """Test a collector name can only be registered once"""
        self.registry.register_collector(PingdomCollector(self.client))

        with pytest.raises(ValueError):
            self.registry.register_collector(PingdomCollector(self.client))

    def test_generate_text_format(self):
        """Test a successful scrape is rendered in the text format"""
        self.client.list_checks.return_value = [CHECK]
        self.registry.register_collector(PingdomCollector(self.client))

        content, content_type = self.registry.generate()
        families = parse(content)

        assert content_type.startswith("text/plain")
        assert families["pingdom_up"].samples[0].value == 1.0
        assert families["pingdom_up"].type == "gauge"

        statuses = {s.labels["status"]: s.value for s in families["pingdom_check_status"].samples}
        assert statuses == {"unknown": 0.0, "paused": 0.0, "up": 1.0, "unconfirmed_down": 0.0, "down": 0.0}

        response_time = families["pingdom_check_response_time"].samples[0]
        assert response_time.labels == {"id": "1", "name": "A", "hostname": "a.com"}
        assert response_time.value == 120.0
        assert families["pingdom_check_resolution"].samples[0].value == 5.0

        assert families["pingdom_exporter_build_info"].samples[0].labels["version"] == self.config.service_version

    def test_generate_after_failure(self):
        """Test a failed scrape renders only pingdom_up=0 for the collector"""
        self.client.list_checks.side_effect = PingdomAPIError("boom")
        self.registry.register_collector(PingdomCollector(self.client))

        content, _ = self.registry.generate()
        families = parse(content)

        assert families["pingdom_up"].samples[0].value == 0.0
        assert "pingdom_check_status" not in families
        assert "pingdom_check_response_time" not in families

    def test_generate_openmetrics(self):
        """Test OpenMetrics is negotiated from the Accept header"""
        self.client.list_checks.return_value = [CHECK]
        self.registry.register_collector(PingdomCollector(self.client))

        content, content_type = self.registry.generate("application/openmetrics-text; version=1.0.0")

        assert content_type.startswith("application/openmetrics-text")
        assert content.decode().rstrip().endswith("# EOF")

    def test_process_metrics_enabled(self):
        """Test platform metrics are added when enabled"""
        self.config.enable_process_metrics = True
        registry = MetricsRegistry(self.config)

        content, _ = registry.generate()

        assert "python_info" in content.decode()

    def test_collector_status(self):
        """Test status lists the collector's metric families"""
        self.registry.register_collector(PingdomCollector(self.client))

        status = self.registry.get_collector_status()

        assert status["pingdom"]["class"] == "PingdomCollector"
        assert "pingdom_check_status" in status["pingdom"]["metrics"]


class TestPrometheusCollectorAdapter:
    """Test conversion of samples into metric families"""

    def test_describe_builds_empty_families(self):
        """Test describe exposes names without samples"""
        adapter = PrometheusCollectorAdapter(PingdomCollector(Mock()))

        families = adapter.describe()

        assert [f.name for f in families] == [
            "pingdom_up",
            "pingdom_check_status",
            "pingdom_check_response_time",
            "pingdom_check_resolution",
        ]
        assert all(f.samples == [] for f in families)

    def test_group_samples_preserves_order(self):
        """Test samples are grouped per family in emission order"""
        client = Mock()
        client.list_checks.return_value = [CHECK, Check(id=2, name="B", hostname="b.com", status="down")]

        families = group_samples(PingdomCollector(client).collect())

        assert [f.name for f in families] == [
            "pingdom_up",
            "pingdom_check_status",
            "pingdom_check_response_time",
            "pingdom_check_resolution",
        ]
        status_ids = [s.labels["id"] for s in families[1].samples]
        assert status_ids == ["1"] * 5 + ["2"] * 5

