"""Base filter interface for catalog data-quality filters."""

from abc import ABC, abstractmethod
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class BaseFilter(ABC, Generic[T]):
    """Base interface for all catalog filters.

    Generic type T represents the type of items being filtered.
    - CityFilter: T = str (city names)
    """

    @abstractmethod
    def filter(self, items: list[T]) -> tuple[list[T], list[tuple[T, str]]]:
        """Filter items of type T.

        Args:
            items: Input items to filter

        Returns:
            Tuple of (passed_items, rejected_items_with_reasons)
            where rejected_items_with_reasons is a list of (item, reason) tuples
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Filter name for logging and identification."""
        pass


FilterResult: TypeAlias = tuple[list[T], list[tuple[T, str]]]
