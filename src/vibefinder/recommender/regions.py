"""Region choices derived from the live catalog."""

from vibefinder.filters import CityFilter
from vibefinder.models import Venue

MAX_REGION_OPTIONS = 5


def build_region_options(
    venues: list[Venue],
    max_options: int = MAX_REGION_OPTIONS,
    city_filter: CityFilter | None = None,
) -> list[str]:
    """Up to max_options distinct, well-formed city names in catalog order."""
    city_filter = city_filter or CityFilter()
    passed, _ = city_filter.filter([v.city for v in venues])
    return passed[:max_options]
