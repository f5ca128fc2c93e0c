from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from country_stats.config import Settings
from country_stats.main import create_app

UPSTREAM = "https://upstream.test/v3/covid-19/countries"


def country_payload(name: str, deaths: int = 0, recovered: int = 0, **overrides: Any) -> Dict[str, Any]:
    """One upstream row in wire (camelCase) format."""
    row = {
        "updated": 1600000000000,
        "country": name,
        "countryInfo": {
            "_id": 4,
            "iso2": name[:2].upper(),
            "iso3": name[:3].upper(),
            "lat": 33.0,
            "long": 65.0,
            "flag": f"https://flags.test/{name.lower()}.png",
        },
        "cases": 1000,
        "todayCases": 10,
        "deaths": deaths,
        "todayDeaths": 1,
        "recovered": recovered,
        "active": 500,
        "critical": 5,
        "casesPerOneMillion": 25.5,
        "deathsPerOneMillion": 1.25,
        "tests": 20000,
        "testsPerOneMillion": 512.0,
    }
    row.update(overrides)
    return row


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    return [
        country_payload("Afghanistan", deaths=30, recovered=100),
        country_payload("Albania", deaths=5, recovered=50),
        country_payload("Algeria", deaths=70, recovered=200),
    ]


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], TestClient]:
    """Build a TestClient whose upstream is answered by `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> TestClient:
        settings = Settings(upstream_url=UPSTREAM, timeout=1.0)
        app = create_app(settings, transport=httpx.MockTransport(handler))
        return TestClient(app)

    return _make


@pytest.fixture
def upstream_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def row() -> Callable[..., Dict[str, Any]]:
    return country_payload
