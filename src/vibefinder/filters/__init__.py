"""Data-quality filters for catalog values."""

from vibefinder.filters.base import BaseFilter
from vibefinder.filters.city_filter import CityFilter, CityFilterConfig

__all__ = ["BaseFilter", "CityFilter", "CityFilterConfig"]
