# country_stats/services/threshold_filter.py
from __future__ import annotations

from operator import attrgetter
from typing import Callable, Dict, Iterable, List

from country_stats.models.country import Country
from country_stats.models.threshold import Threshold

FieldAccessor = Callable[[Country], int]

# Integer counters that can be range-filtered, keyed by route segment.
THRESHOLD_FIELDS: Dict[str, FieldAccessor] = {
    "deaths": attrgetter("deaths"),
    "recovered": attrgetter("recovered"),
}


def filter_by_threshold(
    countries: Iterable[Country],
    field: FieldAccessor,
    threshold: Threshold,
) -> List[Country]:
    """
    Keep the countries whose `field` lies strictly inside `threshold`.

    Always returns a new list in input order; an unbounded threshold
    returns every country. An empty result is a normal outcome.
    """
    if threshold.unbounded:
        return list(countries)
    return [c for c in countries if threshold.contains(field(c))]
