"""Metrics registry for managing collectors and rendering scrapes"""
import platform
from typing import Dict, List, Optional, Tuple
from prometheus_client import CollectorRegistry, Info, PlatformCollector, ProcessCollector
from prometheus_client.exposition import choose_encoder
from collectors.base import BaseCollector
from .exporters.prometheus import PrometheusCollectorAdapter
from logging_config import get_logger


logger = get_logger(__name__)


class MetricsRegistry:
    """Central registry for all metric collectors"""

    def __init__(self, config=None):
        self.config = config
        self.collectors: Dict[str, BaseCollector] = {}
        self.registry = CollectorRegistry(auto_describe=True)
        self._register_defaults()

    def _register_defaults(self):
        """Register build information and, if enabled, process metrics"""
        service_name = getattr(self.config, 'service_name', 'pingdom_exporter')
        service_version = getattr(self.config, 'service_version', 'unknown')

        build_info = Info(service_name.replace('-', '_') + '_build', "Build information", registry=self.registry)
        build_info.info({
            "version": service_version,
            "python_version": platform.python_version(),
        })

        if getattr(self.config, 'enable_process_metrics', False):
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)

    def register_collector(self, collector: BaseCollector):
        """Register a new collector.

        The collector's descriptors are checked by prometheus_client at this
        point, so a naming clash fails here rather than on the first scrape.
        """
        if not isinstance(collector, BaseCollector):
            raise ValueError("Collector must inherit from BaseCollector")
        if collector.name in self.collectors:
            raise ValueError(f"Collector already registered: {collector.name}")

        self.registry.register(PrometheusCollectorAdapter(collector))
        self.collectors[collector.name] = collector
        logger.info("Registered collector", collector=collector.name, event_type="collector_registered")

    def list_collectors(self) -> List[str]:
        """List all registered collector names"""
        return list(self.collectors.keys())

    def generate(self, accept_header: Optional[str] = None) -> Tuple[bytes, str]:
        """Run a scrape and render it in the format negotiated from the Accept header"""
        encoder, content_type = choose_encoder(accept_header or "")
        return encoder(self.registry), content_type

    def get_collector_status(self) -> Dict[str, Dict]:
        """Get status information for all collectors"""
        return {
            name: {
                "class": collector.__class__.__name__,
                "help": collector.help_text,
                "metrics": [descriptor.name for descriptor in collector.describe()]
            }
            for name, collector in self.collectors.items()
        }
