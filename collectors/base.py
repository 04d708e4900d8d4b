"""Base collector class and interfaces"""
from abc import ABC, abstractmethod
from typing import Iterator, Sequence
from metrics.models import MetricDescriptor, MetricValue


class BaseCollector(ABC):
    """Base class for all metric collectors"""

    def __init__(self, name: str = "", help_text: str = ""):
        self._name = name
        self._help_text = help_text

    @abstractmethod
    def describe(self) -> Sequence[MetricDescriptor]:
        """Return the descriptors of every metric this collector can emit"""
        pass

    @abstractmethod
    def collect(self) -> Iterator[MetricValue]:
        """Yield the samples of one scrape"""
        pass

    @property
    def name(self) -> str:
        """Collector name for identification"""
        return self._name

    @property
    def help_text(self) -> str:
        """Help text describing what this collector does"""
        return self._help_text or f"{self.name} metrics collector"
