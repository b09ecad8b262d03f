"""Tests for catalog normalization and loading."""

import json

import httpx
import pytest

from vibefinder.catalog import (
    CatalogError,
    fetch_catalog,
    load_catalog,
    load_sample_catalog,
    normalize_catalog,
    normalize_venue,
)
from vibefinder.recommender import build_region_options


class TestNormalizeVenue:
    """Tests for mapping heterogeneous records onto Venue."""

    def test_camel_case_record(self):
        venue = normalize_venue(
            {
                "_id": "abc",
                "name": "Blue Fig",
                "nameAr": "بلو فيج",
                "city": " Amman ",
                "address": "Abdoun",
                "type": "Cafe",
                "cuisineType": "Cafe",
                "priceRange": "$$",
                "rating": 4.6,
                "description": "Great coffee",
                "imageUrl": "https://example.com/fig.jpg",
            }
        )

        assert venue.id == "abc"
        assert venue.name_ar == "بلو فيج"
        assert venue.city == "Amman"
        assert venue.type == "cafe"
        assert venue.cuisine_type == "Cafe"
        assert venue.price_range == "$$"
        assert venue.image_url == "https://example.com/fig.jpg"

    def test_bilingual_record(self):
        """Should split bilingual names and keep both description languages."""
        venue = normalize_venue(
            {
                "id": 2,
                "name": {"en": "Romero", "ar": "روميرو"},
                "location": {"en": "Abdoun, Amman", "ar": "عبدون، عمان"},
                "cuisine": "Italian",
                "description": {"en": "Quiet terrace", "ar": "جلسة هادئ"},
                "image": "https://example.com/romero.jpg",
            }
        )

        assert venue.id == "2"
        assert venue.name == "Romero"
        assert venue.name_ar == "روميرو"
        assert venue.address == "Abdoun, Amman"
        assert venue.cuisine_type == "Italian"
        assert "Quiet terrace" in venue.description
        assert "هادئ" in venue.description
        assert venue.image_url == "https://example.com/romero.jpg"

    @pytest.mark.parametrize(
        "key", ["image_url", "imageUrl", "image"],
    )
    def test_image_fallbacks(self, key: str):
        venue = normalize_venue({"id": "x", key: "https://example.com/x.jpg"})
        assert venue.image_url == "https://example.com/x.jpg"

    def test_prefers_underscore_id(self):
        assert normalize_venue({"_id": "mongo", "id": 7, "name": "X"}).id == "mongo"

    @pytest.mark.parametrize(
        "raw,expected",
        [("4.2", 4.2), (None, 0.0), ("n/a", 0.0), (7, 5.0), (-1, 0.0)],
    )
    def test_rating_coercion(self, raw, expected):
        assert normalize_venue({"id": "x", "rating": raw}).rating == expected

    def test_missing_fields_default_empty(self):
        venue = normalize_venue({"id": "bare"})

        assert venue.name == ""
        assert venue.city == ""
        assert venue.rating == 0.0
        assert venue.image_url is None

    def test_name_used_as_id(self):
        assert normalize_venue({"name": "Hashem"}).id == "Hashem"

    def test_rejects_anonymous_record(self):
        with pytest.raises(CatalogError):
            normalize_venue({"city": "Amman"})


class TestNormalizeCatalog:
    def test_skips_unusable_records(self):
        venues = normalize_catalog([{"id": "a"}, "junk", None, {"city": "Amman"}, {"id": "b"}])
        assert [v.id for v in venues] == ["a", "b"]

    def test_empty(self):
        assert normalize_catalog([]) == []


class TestLoadCatalog:
    """Tests for JSON file loading."""

    def test_list_file(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps([{"id": "a", "city": "Amman"}]), encoding="utf-8")

        venues = load_catalog(path)
        assert [v.city for v in venues] == ["Amman"]

    def test_envelope_file(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps({"restaurants": [{"id": "a"}, {"id": "b"}]}), encoding="utf-8")

        assert len(load_catalog(path)) == 2

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError, match="Invalid JSON"):
            load_catalog(path)

    def test_invalid_encoding(self, tmp_path):
        """Should report non-UTF-8 files as catalog errors."""
        path = tmp_path / "venues.json"
        path.write_bytes(b'[{"id": "a", "city": "\xff"}]')

        with pytest.raises(CatalogError, match="Invalid UTF-8"):
            load_catalog(path)

    def test_unexpected_shape(self, tmp_path):
        path = tmp_path / "venues.json"
        path.write_text(json.dumps({"venues": []}), encoding="utf-8")

        with pytest.raises(CatalogError, match="Expected a list"):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot read"):
            load_catalog(tmp_path / "missing.json")


class TestSampleCatalog:
    def test_loads_all_venues(self):
        venues = load_sample_catalog()

        assert len(venues) == 8
        assert venues[0].id == "sufra"
        assert venues[1].name_ar == "روميرو"

    def test_region_options_skip_coordinates(self):
        assert build_region_options(load_sample_catalog()) == ["Amman", "Irbid", "Aqaba"]


class TestFetchCatalog:
    """Tests for the restaurants API client."""

    def _client(self, handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    @pytest.mark.asyncio
    async def test_fetches_and_normalizes(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=[{"_id": "a", "city": "Amman", "imageUrl": "u"}])

        async with self._client(handler) as client:
            venues = await fetch_catalog("http://localhost:5001/", client=client)

        assert seen == ["http://localhost:5001/api/restaurants"]
        assert venues[0].id == "a"
        assert venues[0].image_url == "u"

    @pytest.mark.asyncio
    async def test_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom"})

        async with self._client(handler) as client:
            with pytest.raises(CatalogError, match="500"):
                await fetch_catalog("http://localhost:5001", client=client)

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"message": "unauthorized"})

        async with self._client(handler) as client:
            with pytest.raises(CatalogError, match="Expected a list"):
                await fetch_catalog("http://localhost:5001", client=client)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with self._client(handler) as client:
            with pytest.raises(CatalogError, match="Failed to fetch"):
                await fetch_catalog("http://localhost:5001", client=client)
