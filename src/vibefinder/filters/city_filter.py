"""City filter for dropping malformed city values from the catalog."""

import re

from pydantic import BaseModel
from rich.console import Console

from vibefinder.filters.base import BaseFilter, FilterResult

console = Console()


class CityFilterConfig(BaseModel):
    """Thresholds for accepting a city name."""

    min_length: int = 2


class CityFilter(BaseFilter[str]):
    """Rejects city values that cannot be offered as a region.

    Catalog rows sometimes carry raw coordinates ("31.95") or stray
    characters in the city column. Those are dropped silently; the reasons
    are only reported in verbose mode.
    """

    # Digits or a decimal point anywhere mark a coordinate-looking value
    NUMERIC_PATTERN = re.compile(r"[\d.]")

    def __init__(self, config: CityFilterConfig | None = None, verbose: bool = False):
        self.config = config or CityFilterConfig()
        self.verbose = verbose

    @property
    def name(self) -> str:
        return "CityFilter"

    def filter(self, cities: list[str]) -> FilterResult[str]:
        """Deduplicate cities and drop malformed ones, keeping first-seen order.

        Args:
            cities: Raw city values from the catalog

        Returns:
            Tuple of (passed_cities, rejected_cities_with_reasons)
        """
        passed: list[str] = []
        rejected: list[tuple[str, str]] = []
        seen: set[str] = set()

        for city in cities:
            if city in seen:
                continue
            seen.add(city)

            if reason := self._reject_reason(city):
                rejected.append((city, reason))
                if self.verbose:
                    console.print(f"[dim]  ✗ city {city!r}: {reason}[/dim]")
            else:
                passed.append(city)

        return passed, rejected

    def _reject_reason(self, city: str) -> str | None:
        city = city.strip()
        if not city:
            return "Empty"
        if len(city) < self.config.min_length:
            return f"Too short ({len(city)} < {self.config.min_length} chars)"
        if self.NUMERIC_PATTERN.search(city):
            return "Contains digits or a decimal point"
        return None
