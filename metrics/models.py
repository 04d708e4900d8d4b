"""Metric data models"""
import re
from dataclasses import dataclass, field
from typing import Dict, Tuple
from enum import Enum


METRIC_NAME_RE = re.compile(r'^[a-zA-Z_:][a-zA-Z0-9_:]*$')
LABEL_NAME_RE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')


class MetricType(Enum):
    """Prometheus metric types"""
    GAUGE = "gauge"


def build_fq_name(namespace: str, subsystem: str, name: str) -> str:
    """Join the non-empty name parts with underscores"""
    return "_".join(part for part in (namespace, subsystem, name) if part)


@dataclass(frozen=True)
class MetricDescriptor:
    """Static description of a metric family"""
    name: str
    help_text: str
    label_names: Tuple[str, ...] = ()
    metric_type: MetricType = MetricType.GAUGE

    def __post_init__(self):
        if not METRIC_NAME_RE.match(self.name):
            raise ValueError(f"Invalid metric name: {self.name!r}")
        # Accept any sequence but store a tuple
        object.__setattr__(self, 'label_names', tuple(self.label_names))
        for label in self.label_names:
            if not LABEL_NAME_RE.match(label) or label.startswith('__'):
                raise ValueError(f"Invalid label name {label!r} for metric {self.name}")
        if len(set(self.label_names)) != len(self.label_names):
            raise ValueError(f"Duplicate label names for metric {self.name}: {self.label_names}")

    def sample(self, value: float, *label_values: str) -> "MetricValue":
        """Create a sample of this metric; label values follow label_names order"""
        return MetricValue(descriptor=self, value=value, label_values=label_values)


@dataclass(frozen=True)
class MetricValue:
    """Represents a single metric sample"""
    descriptor: MetricDescriptor
    value: float
    label_values: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))
        object.__setattr__(self, 'label_values', tuple(self.label_values))
        if len(self.label_values) != len(self.descriptor.label_names):
            raise ValueError(
                f"Metric {self.descriptor.name} expects {len(self.descriptor.label_names)} "
                f"label values, got {len(self.label_values)}"
            )

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def labels(self) -> Dict[str, str]:
        """Label names mapped to their values"""
        return dict(zip(self.descriptor.label_names, self.label_values))
