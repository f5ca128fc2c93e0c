# country_stats/routes/countries.py: upstream country list, optionally range-filtered
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from country_stats.models.country import dump_countries
from country_stats.models.threshold import Threshold
from country_stats.providers.disease_provider import CountryStatsProvider
from country_stats.services.threshold_filter import THRESHOLD_FIELDS, filter_by_threshold

router = APIRouter(tags=["countries"])


def get_provider(request: Request) -> CountryStatsProvider:
    return request.app.state.provider


@router.get("/countries", summary="All countries", operation_id="countries_all")
def all_countries(provider: CountryStatsProvider = Depends(get_provider)) -> JSONResponse:
    """Every country exactly as upstream returned it. FetchError is mapped to 502 by the app."""
    return JSONResponse(content=dump_countries(provider.fetch_countries()))


def _threshold_endpoint(field_name: str):
    field = THRESHOLD_FIELDS[field_name]

    def endpoint(
        min_value: Optional[int] = Query(None, alias="min", description=f"Keep countries with {field_name} > min"),
        max_value: Optional[int] = Query(None, alias="max", description=f"Keep countries with {field_name} < max"),
        provider: CountryStatsProvider = Depends(get_provider),
    ) -> JSONResponse:
        countries = provider.fetch_countries()
        kept = filter_by_threshold(countries, field, Threshold(min=min_value, max=max_value))
        return JSONResponse(content=dump_countries(kept))

    endpoint.__name__ = f"countries_by_{field_name}"
    return endpoint


for _field_name in THRESHOLD_FIELDS:
    router.add_api_route(
        f"/countries/{_field_name}",
        _threshold_endpoint(_field_name),
        methods=["GET"],
        summary=f"Countries filtered on {_field_name}",
        operation_id=f"countries_{_field_name}",
    )
