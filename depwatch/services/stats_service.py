"""Package statistics lookup against the go-search service."""

import logging
import re
from typing import Any, Dict, Optional

import requests

from depwatch import __version__
from depwatch.models import PackageStats
from depwatch.utils.exceptions import (
    StatsConnectionError,
    StatsLookupError,
    StatsResponseError,
    StatsTimeoutError,
)
from depwatch.utils.http import create_http_session

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://go-search.org/api"
SERVICE_NAME = "go-search"

# host/owner/repo prefix of an import path
_REPOSITORY_PREFIX = re.compile(r"(.*?/.*?/.*?)(?:/|$)")


def normalize_package_name(name: str) -> str:
    """Reduce an import path to its repository root.

    ``github.com/owner/repo/sub/pkg`` becomes ``github.com/owner/repo``; names
    with fewer than three path segments are returned unchanged.
    """
    match = _REPOSITORY_PREFIX.match(name)
    if match:
        return match.group(1)
    return name


class GoSearchStatsService:
    """Fetches popularity statistics for a package.

    Every failure raises a StatsLookupError subclass; nothing is retried
    unless ``max_retries`` is configured.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the statistics service.

        Args:
            config: The ``stats`` section of the depwatch configuration
        """
        config = config or {}
        self.endpoint = config.get("endpoint") or DEFAULT_ENDPOINT
        self.timeout = config.get("timeout", 30)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = create_http_session(
            user_agent=config.get("user_agent") or f"depwatch/{__version__}",
            timeout=self.timeout,
            max_retries=config.get("max_retries", 0),
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.session.close()

    def lookup(self, package: str) -> PackageStats:
        """Get usage statistics for ``package``.

        Args:
            package: Import path as given on the command line

        Returns:
            PackageStats for the package's repository root

        Raises:
            StatsLookupError: On network failure, non-OK status or malformed body
        """
        package_id = normalize_package_name(package)
        params = {"action": "package", "id": package_id}
        self.logger.debug(f"Looking up stats for {package_id} at {self.endpoint}")

        try:
            response = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise StatsTimeoutError(
                message=f"Timeout while fetching stats for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                timeout_duration=self.timeout,
                original_exception=e,
            )
        except requests.exceptions.ConnectionError as e:
            raise StatsConnectionError(
                message=f"Connection failed while fetching stats for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                original_exception=e,
            )
        except requests.exceptions.RequestException as e:
            raise StatsLookupError(
                message=f"Request failed while fetching stats for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                original_exception=e,
            )

        if not response.ok:
            raise StatsResponseError(
                message=f"Stats service rejected lookup for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise StatsResponseError(
                message=f"Malformed stats response for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                original_exception=e,
            )

        if not isinstance(payload, dict):
            raise StatsResponseError(
                message=f"Unexpected stats response for {package_id}: expected a JSON object",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
            )

        try:
            stats = PackageStats.from_api(payload)
        except (TypeError, ValueError) as e:
            raise StatsResponseError(
                message=f"Malformed stats response for {package_id}",
                service=SERVICE_NAME,
                endpoint=self.endpoint,
                original_exception=e,
            )

        return stats
