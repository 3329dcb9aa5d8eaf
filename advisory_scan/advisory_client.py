"""
Client for the GitHub global security advisory API.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import requests

from .config import ScannerSettings
from .errors import AdvisoryQueryFailed, InvalidSeverityArgument
from .interfaces import AdvisorySource
from .models import AdvisoryRecord


logger = logging.getLogger(__name__)


class GitHubAdvisoryClient(AdvisorySource):
    """Query advisories affecting a list of ``name@version`` strings."""

    def __init__(
        self,
        settings: Optional[ScannerSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or ScannerSettings()
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {'Accept': 'application/vnd.github+json'}
        if self.settings.token:
            headers['Authorization'] = f"Bearer {self.settings.token}"
        return headers

    def query(self, ecosystem: str, affects: Sequence[str]) -> List[AdvisoryRecord]:
        """Fetch the advisories for ``affects`` in one request.

        Args:
            ecosystem: Package ecosystem, e.g. ``npm``
            affects: ``name@version`` strings

        Returns:
            Advisory records in the order returned by the API

        Raises:
            AdvisoryQueryFailed: on transport errors, non-success status or
                an unexpected response body
        """
        params = {
            'ecosystem': ecosystem,
            'affects': ','.join(affects),
            'per_page': self.settings.per_page,
        }
        logger.info("Querying %s for %d packages", self.settings.advisory_url, len(affects))
        try:
            with self.session.get(
                self.settings.advisory_url,
                headers=self._headers(),
                params=params,
                timeout=self.settings.timeout,
            ) as response:
                response.raise_for_status()
                try:
                    data = response.json()
                except ValueError as e:
                    raise AdvisoryQueryFailed(f"Advisory response is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise AdvisoryQueryFailed(f"Advisory query failed: {e}") from e

        if not isinstance(data, list):
            raise AdvisoryQueryFailed(
                f"Unexpected advisory response: expected a list, got {type(data).__name__}"
            )

        records = []
        for index, payload in enumerate(data):
            if not isinstance(payload, dict):
                raise AdvisoryQueryFailed(
                    f"Unexpected advisory at position {index}: "
                    f"expected an object, got {type(payload).__name__}"
                )
            try:
                records.append(AdvisoryRecord.from_payload(payload))
            except InvalidSeverityArgument:
                logger.warning(
                    "Skipping advisory %s with unknown severity %r",
                    payload.get('ghsa_id'), payload.get('severity'),
                )
            except (AttributeError, TypeError, ValueError) as e:
                raise AdvisoryQueryFailed(
                    f"Malformed advisory {payload.get('ghsa_id') or index}: {e}"
                ) from e
        logger.info("Received %d advisories", len(records))
        return records
