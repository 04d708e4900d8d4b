"""Pingdom API client

Synchronous client for the Pingdom 2.0 REST API. Only the check listing
endpoint is wrapped; every failure surfaces as PingdomAPIError.
"""
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from logging_config import get_logger
from upstream.models import Check


logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.pingdom.com/api/2.0"
DEFAULT_TIMEOUT = 60.0


class PingdomAPIError(Exception):
    """Raised when the check list cannot be retrieved or parsed"""
    pass


class PingdomClient:
    """Client for the Pingdom check listing endpoint"""

    def __init__(
        self,
        username: str,
        password: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        # httpx.Client is safe to share between scrape threads
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=(username, password),
            headers={"App-Key": api_key, "Accept": "application/json"},
            timeout=timeout,
            transport=transport
        )

    def list_checks(self) -> List[Check]:
        """Return every check on the account.

        The full list is fetched on each call. A response that cannot be
        turned into a complete list of checks is rejected as a whole.
        """
        try:
            response = self._client.get("/checks")
        except httpx.HTTPError as e:
            raise PingdomAPIError(f"Request to {self.base_url}/checks failed: {e}") from e

        if not response.is_success:
            raise PingdomAPIError(self._describe_error(response))

        try:
            payload = response.json()
        except ValueError as e:
            raise PingdomAPIError(f"Invalid JSON in check list response: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("checks"), list):
            raise PingdomAPIError("Check list response has no 'checks' array")

        try:
            checks = [Check.model_validate(item) for item in payload["checks"]]
        except ValidationError as e:
            raise PingdomAPIError(f"Malformed check in response: {e}") from e

        logger.debug("Fetched Pingdom checks", checks_count=len(checks), event_type="pingdom_fetch")
        return checks

    @staticmethod
    def _describe_error(response: httpx.Response) -> str:
        """Build an error message from a non-2xx Pingdom response"""
        try:
            body: Dict[str, Any] = response.json()
            error = body["error"]
            return f"{error['statuscode']} {error['statusdesc']}: {error['errormessage']}"
        except (ValueError, KeyError, TypeError):
            return f"Unexpected HTTP status {response.status_code}"

    def close(self):
        """Release pooled connections"""
        self._client.close()

    def __enter__(self) -> "PingdomClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
