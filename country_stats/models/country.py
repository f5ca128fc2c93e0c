"""
Per-country statistics as served by the upstream `/countries` endpoint.

Wire names are lower camelCase (`todayCases`, `countryInfo`, ...); the
geo identifier arrives as `_id`. Values are passed through verbatim:
no sign checks, no rounding, no deduplication. Validation is strict:
a counter sent as "5", true or 5.0 is rejected, not coerced.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class CountryInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: Optional[int] = Field(default=None, alias="_id")
    iso2: Optional[str] = None
    iso3: Optional[str] = None
    lat: float
    long: float
    flag: Optional[str] = None


class Country(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True, alias_generator=to_camel)

    country: str
    country_info: CountryInfo
    updated: int  # epoch millis
    cases: int
    today_cases: int
    deaths: int
    today_deaths: int
    recovered: int
    active: int
    critical: int
    cases_per_one_million: Optional[float] = None
    deaths_per_one_million: Optional[float] = None
    tests: Optional[int] = None
    tests_per_one_million: Optional[float] = None


COUNTRY_LIST = TypeAdapter(List[Country])


def dump_countries(countries: List[Country]) -> List[dict]:
    """JSON-ready dicts using the upstream (camelCase) field names."""
    return COUNTRY_LIST.dump_python(countries, mode="json", by_alias=True)
