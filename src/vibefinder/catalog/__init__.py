"""Catalog ingestion: loading and normalizing venue records."""

from .loader import fetch_catalog, load_catalog, load_sample_catalog
from .normalize import CatalogError, normalize_catalog, normalize_venue

__all__ = [
    "CatalogError",
    "fetch_catalog",
    "load_catalog",
    "load_sample_catalog",
    "normalize_catalog",
    "normalize_venue",
]
