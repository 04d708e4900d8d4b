"""Metric families exported for Pingdom checks"""
from typing import Tuple
from .models import MetricDescriptor, MetricType, build_fq_name


NAMESPACE = "pingdom"

CHECK_LABELS = ("id", "name", "hostname")

PINGDOM_UP = MetricDescriptor(
    name=build_fq_name(NAMESPACE, "", "up"),
    help_text="Whether the last pingdom scrape was successful (1: up, 0: down)",
    metric_type=MetricType.GAUGE
)

PINGDOM_CHECK_STATUS = MetricDescriptor(
    name=build_fq_name(NAMESPACE, "", "check_status"),
    help_text="The current status of the check (1: true, 0: false)",
    label_names=CHECK_LABELS + ("status",),
    metric_type=MetricType.GAUGE
)

PINGDOM_CHECK_RESPONSE_TIME = MetricDescriptor(
    name=build_fq_name(NAMESPACE, "", "check_response_time"),
    help_text="The response time of the last test in milliseconds",
    label_names=CHECK_LABELS,
    metric_type=MetricType.GAUGE
)

PINGDOM_CHECK_RESOLUTION = MetricDescriptor(
    name=build_fq_name(NAMESPACE, "", "check_resolution"),
    help_text="The resolution of the check",
    label_names=CHECK_LABELS,
    metric_type=MetricType.GAUGE
)


def describe() -> Tuple[MetricDescriptor, ...]:
    """All metric families, independent of upstream state"""
    return (
        PINGDOM_UP,
        PINGDOM_CHECK_STATUS,
        PINGDOM_CHECK_RESPONSE_TIME,
        PINGDOM_CHECK_RESOLUTION,
    )
