"""Normalization of heterogeneous catalog records into canonical venues.

Catalog sources disagree on field names (``_id`` vs ``id``, ``imageUrl`` vs
``image_url`` vs ``image``) and sometimes store bilingual values as
``{"en": ..., "ar": ...}`` dicts. All of that is resolved here so the
engine only ever sees ``Venue``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from vibefinder.models import Venue

console = Console()


class CatalogError(Exception):
    """Raised when a catalog cannot be read or has an unexpected shape."""


def _first(raw: Mapping, *keys: str) -> Any:
    """First key present with a non-empty value."""
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


def _text(value: Any, lang: str = "en") -> str:
    """Plain string from a str or a bilingual dict."""
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return str(value.get(lang) or next((v for v in value.values() if v), ""))
    return str(value)


def _bilingual(value: Any) -> str:
    """Both languages of a bilingual dict joined, so keywords in either match."""
    if isinstance(value, Mapping):
        return " ".join(str(v) for v in value.values() if v)
    return _text(value)


def _rating(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def normalize_venue(raw: Mapping) -> Venue:
    """Map one source record to a Venue.

    Raises:
        CatalogError: if the record has neither an id nor a name.
    """
    raw_name = raw.get("name")
    name = _text(raw_name, "en")
    name_ar = _text(_first(raw, "nameAr", "name_ar"))
    if not name_ar and isinstance(raw_name, Mapping):
        name_ar = _text(raw_name.get("ar"))

    venue_id = _first(raw, "_id", "id")
    if venue_id is None and not name:
        raise CatalogError("Record has neither an id nor a name")

    try:
        return Venue(
            id=str(venue_id if venue_id is not None else name),
            name=name,
            name_ar=name_ar,
            city=_text(raw.get("city")).strip(),
            address=_text(_first(raw, "address", "location")),
            type=_text(raw.get("type")).strip().lower(),
            cuisine_type=_text(_first(raw, "cuisineType", "cuisine_type", "cuisine")),
            price_range=_text(_first(raw, "priceRange", "price_range")).strip(),
            rating=_rating(raw.get("rating")),
            description=_bilingual(raw.get("description")),
            image_url=_first(raw, "image_url", "imageUrl", "image"),
        )
    except ValidationError as e:
        raise CatalogError(f"Invalid record {venue_id!r}: {e}") from e


def normalize_catalog(records: Iterable[Any], verbose: bool = False) -> list[Venue]:
    """Normalize every usable record, skipping the ones that cannot be mapped."""
    venues: list[Venue] = []
    skipped = 0

    for i, raw in enumerate(records):
        if not isinstance(raw, Mapping):
            skipped += 1
            if verbose:
                console.print(f"[yellow]Skipping record {i}: not an object[/yellow]")
            continue
        try:
            venues.append(normalize_venue(raw))
        except CatalogError as e:
            skipped += 1
            if verbose:
                console.print(f"[yellow]Skipping record {i}: {e}[/yellow]")

    if verbose and skipped:
        console.print(f"[dim]Normalized {len(venues)} venues, skipped {skipped}[/dim]")

    return venues
