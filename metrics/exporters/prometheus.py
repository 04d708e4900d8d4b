"""Bridge between collectors and prometheus_client"""
from typing import Dict, Iterable, List
from prometheus_client.core import GaugeMetricFamily, Metric
from collectors.base import BaseCollector
from ..models import MetricDescriptor, MetricType, MetricValue


FAMILY_TYPES = {
    MetricType.GAUGE: GaugeMetricFamily,
}


def new_family(descriptor: MetricDescriptor) -> Metric:
    """Create an empty metric family for a descriptor"""
    family_cls = FAMILY_TYPES[descriptor.metric_type]
    return family_cls(descriptor.name, descriptor.help_text, labels=list(descriptor.label_names))


class PrometheusCollectorAdapter:
    """Expose a BaseCollector through the prometheus_client collector protocol"""

    def __init__(self, collector: BaseCollector):
        self.collector = collector

    def describe(self) -> List[Metric]:
        """Empty families, used by the registry to check names at registration"""
        return [new_family(descriptor) for descriptor in self.collector.describe()]

    def collect(self) -> Iterable[Metric]:
        """Run one scrape of the wrapped collector"""
        return group_samples(self.collector.collect())


def group_samples(samples: Iterable[MetricValue]) -> List[Metric]:
    """Group samples into families, preserving first-seen and sample order"""
    families: Dict[MetricDescriptor, Metric] = {}
    for sample in samples:
        family = families.get(sample.descriptor)
        if family is None:
            family = families[sample.descriptor] = new_family(sample.descriptor)
        family.add_metric(list(sample.label_values), sample.value)
    return list(families.values())
