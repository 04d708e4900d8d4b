"""Pingdom check metrics collector"""
import time
from typing import Iterator, Sequence
from .base import BaseCollector
from metrics.models import MetricDescriptor, MetricValue
from metrics import schema
from upstream.client import PingdomAPIError
from upstream.models import Check, CheckStatus
from logging_config import get_logger, log_scrape


logger = get_logger(__name__)


class PingdomCollector(BaseCollector):
    """Expose the state of every Pingdom check on the account.

    Each call to collect() performs one fresh fetch of the check list. A
    failed fetch is reported through ``pingdom_up`` only; no per-check
    samples are emitted for that scrape.
    """

    def __init__(self, client):
        super().__init__("pingdom", "Pingdom check status, response time and resolution")
        self.client = client

    def describe(self) -> Sequence[MetricDescriptor]:
        return schema.describe()

    def collect(self) -> Iterator[MetricValue]:
        start_time = time.time()

        try:
            checks = self.client.list_checks()
        except PingdomAPIError as e:
            logger.error(
                "Error retrieving checks",
                error=str(e),
                error_type=type(e).__name__,
                event_type="pingdom_fetch_error",
                exc_info=True
            )
            yield schema.PINGDOM_UP.sample(0)
            return

        yield schema.PINGDOM_UP.sample(1)

        samples_count = 1
        for check in checks:
            for sample in self._check_samples(check):
                samples_count += 1
                yield sample

        log_scrape(logger, len(checks), samples_count, time.time() - start_time)

    def _check_samples(self, check: Check) -> Iterator[MetricValue]:
        """Samples for a single check, in export order"""
        check_id = str(check.id)

        # An unrecognised status leaves every indicator at 0
        for status in CheckStatus:
            yield schema.PINGDOM_CHECK_STATUS.sample(
                1 if check.status == status.value else 0,
                check_id, check.name, check.hostname, status.value
            )

        yield schema.PINGDOM_CHECK_RESPONSE_TIME.sample(
            check.last_response_time, check_id, check.name, check.hostname
        )

        yield schema.PINGDOM_CHECK_RESOLUTION.sample(
            check.resolution, check_id, check.name, check.hostname
        )
