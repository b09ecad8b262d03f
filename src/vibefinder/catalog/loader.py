"""Catalog sources: JSON files, the restaurants API, and the bundled sample."""

import json
from pathlib import Path
from typing import Any

import httpx

from vibefinder.catalog.normalize import CatalogError, normalize_catalog
from vibefinder.models import Venue

SAMPLE_CATALOG = Path(__file__).parent / "data" / "sample_venues.json"
RESTAURANTS_PATH = "/api/restaurants"


def _records(data: Any) -> list:
    """Accept a bare list or a {"restaurants": [...]} envelope."""
    if isinstance(data, dict) and isinstance(data.get("restaurants"), list):
        return data["restaurants"]
    if isinstance(data, list):
        return data
    raise CatalogError(f"Expected a list of venues, got {type(data).__name__}")


def load_catalog(path: Path, verbose: bool = False) -> list[Venue]:
    """Load and normalize a JSON catalog file."""
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"Invalid UTF-8 in catalog {path}: {e}") from e

    return normalize_catalog(_records(data), verbose=verbose)


def load_sample_catalog(verbose: bool = False) -> list[Venue]:
    """Bundled demo catalog of Amman restaurants and cafes."""
    return load_catalog(SAMPLE_CATALOG, verbose=verbose)


async def fetch_catalog(
    base_url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
    verbose: bool = False,
) -> list[Venue]:
    """Fetch the restaurant list from the catalog API and normalize it."""
    url = base_url.rstrip("/") + RESTAURANTS_PATH

    async def get(c: httpx.AsyncClient) -> httpx.Response:
        return await c.get(
            url,
            headers={"Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
        )

    try:
        if client is not None:
            response = await get(client)
        else:
            async with httpx.AsyncClient() as c:
                response = await get(c)
    except httpx.HTTPError as e:
        raise CatalogError(f"Failed to fetch {url}: {e}") from e

    if response.status_code != 200:
        raise CatalogError(f"Catalog API returned {response.status_code} for {url}")

    try:
        data = response.json()
    except ValueError as e:
        raise CatalogError(f"Catalog API returned invalid JSON: {e}") from e

    return normalize_catalog(_records(data), verbose=verbose)
