# country_stats/providers/disease_provider.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional
import logging

import httpx
from pydantic import ValidationError

from country_stats.config import Settings
from country_stats.models.country import COUNTRY_LIST, Country

logger = logging.getLogger("country-stats")

_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "country-stats/1.0",
}


class FetchFailureKind(str, Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    TIMEOUT = "timeout"


class FetchError(Exception):
    """
    Upstream could not be fetched or parsed.

    `kind` is kept for logs only; clients get one generic error whatever
    the cause.
    """

    def __init__(self, kind: FetchFailureKind, url: str) -> None:
        super().__init__(f"upstream fetch failed ({kind.value}): {url}")
        self.kind = kind
        self.url = url


# -------------------------------------------------------------------
# HTTP CLIENT (shared per app)
# -------------------------------------------------------------------
def _timeout(total: float) -> httpx.Timeout:
    return httpx.Timeout(
        timeout=total,
        connect=min(2.0, total),
        read=total,
        write=min(2.0, total),
        pool=min(2.0, total),
    )


def build_client(settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    return httpx.Client(
        timeout=_timeout(settings.timeout),
        headers=_HEADERS,
        follow_redirects=True,
        transport=transport,
    )


class CountryStatsProvider:
    """Fetches the country list from the configured upstream URL, one GET per call."""

    def __init__(self, upstream_url: str, client: httpx.Client) -> None:
        self._url = upstream_url
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    def fetch_countries(self) -> List[Country]:
        logger.debug("GET %s", self._url)
        try:
            r = self._client.get(self._url)
            r.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("upstream timeout %s: %r", self._url, e)
            raise FetchError(FetchFailureKind.TIMEOUT, self._url) from e
        except httpx.HTTPError as e:
            logger.warning("upstream transport error %s: %r", self._url, e)
            raise FetchError(FetchFailureKind.TRANSPORT, self._url) from e

        try:
            # malformed JSON, wrong shape and missing fields all land here
            return COUNTRY_LIST.validate_json(r.content)
        except ValidationError as e:
            logger.warning(
                "upstream decode error %s: %d problem(s), first: %s",
                self._url,
                e.error_count(),
                e.errors()[0]["msg"] if e.error_count() else "",
            )
            raise FetchError(FetchFailureKind.DECODE, self._url) from e
