"""
Pytest configuration for museum tests.
"""

import base64
import json
import threading

import pytest
from django.test import Client

from museum.src.services.met.errors import TransportError

SEED_CATALOG = {
    "items": [
        {
            "id": 1,
            "title": "Bronze oil lamp",
            "description": "Small oil lamp with a ring handle.",
            "category": "Lighting",
            "collection": "Antiquity",
            "photo": "https://example.com/lamp.jpg",
            "year": 100,
            "cultural_context": "Roman",
            "historical_period": "Imperial",
            "material": "Bronze",
            "dimensions": "8 x 14 cm",
        },
        {
            "id": 2,
            "title": "Azulejo panel",
            "description": "Blue and white tile panel.",
            "category": "Decorative arts",
            "collection": "Ceramics",
            "photo": "https://example.com/tiles.jpg",
            "year": 1680,
            "cultural_context": "Portuguese",
            "historical_period": "Baroque",
            "material": "Tin-glazed earthenware",
            "dimensions": "56 x 56 cm",
        },
    ],
    "collections": [
        {"id": 1, "name": "Antiquity", "description": "Ancient objects.", "color": "#8A5A44"},
        {"id": 2, "name": "Ceramics", "description": "Fired clay.", "color": "#2F5D8A"},
        {"id": 3, "name": "Textiles", "description": "Woven works.", "color": "#AA3355"},
    ],
}


@pytest.fixture(autouse=True)
def disable_rate_limiting(settings):
    """Disable django-ratelimit for all tests to prevent test interference."""
    settings.RATELIMIT_ENABLE = False


@pytest.fixture(autouse=True)
def catalog_file(settings, tmp_path):
    """Point the catalog store at a fresh copy of the seed catalog."""
    path = tmp_path / "museum.json"
    path.write_text(json.dumps(SEED_CATALOG), encoding="utf-8")
    settings.CATALOG_DATA_FILE = path
    return path


@pytest.fixture(autouse=True)
def clear_caches(catalog_file):
    """Drop the shared service instances before and after each test."""
    from museum.src.cache_registry import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()


# ---- Met fakes ----


def make_met_record(object_id: int, artist: str = "", image: bool = True, **overrides):
    record = {
        "objectID": object_id,
        "title": f"Work {object_id}",
        "artistDisplayName": artist,
        "artistAlphaSort": "",
        "objectDate": "ca. 1890",
        "objectBeginDate": 1885,
        "primaryImage": f"https://images.example.com/{object_id}.jpg" if image else "",
        "primaryImageSmall": (
            f"https://images.example.com/{object_id}-small.jpg" if image else ""
        ),
        "culture": "",
        "classification": "Paintings",
        "period": "",
        "department": "European Paintings",
        "medium": "Oil on canvas",
        "dimensions": "50 x 60 cm",
    }
    record.update(overrides)
    return record


class FakeMetClient:
    """Stands in for METAPIClient; records every call it receives."""

    def __init__(self, searches=None, objects=None):
        # query -> list of ids, or an exception to raise
        self.searches = searches or {}
        # object id -> record dict, or an exception to raise
        self.objects = objects or {}
        self.search_calls: list[str] = []
        self.object_calls: list[int] = []
        self._lock = threading.Lock()

    def search_object_ids(self, query, artist_or_culture=True):
        with self._lock:
            self.search_calls.append(query)
        result = self.searches.get(query, [])
        if isinstance(result, Exception):
            raise result
        return list(result)

    def get_object(self, object_id):
        with self._lock:
            self.object_calls.append(object_id)
        record = self.objects.get(object_id)
        if isinstance(record, Exception):
            raise record
        if record is None:
            raise TransportError(f"404 for object {object_id}")
        return record


@pytest.fixture
def met_record():
    return make_met_record


@pytest.fixture
def fake_met_client():
    return FakeMetClient


# ---- Admin login ----


def make_google_credential(payload: dict) -> str:
    def segment(data: dict) -> str:
        raw = json.dumps(data).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    return f"{segment({'alg': 'RS256', 'typ': 'JWT'})}.{segment(payload)}.signature"


@pytest.fixture
def google_credential():
    return make_google_credential(
        {
            "name": "Ana Curator",
            "email": "ana@example.com",
            "picture": "https://example.com/ana.png",
        }
    )


@pytest.fixture
def admin_client(google_credential):
    client = Client()
    response = client.post(
        "/auth/google/",
        data=json.dumps({"credential": google_credential}),
        content_type="application/json",
    )
    assert response.status_code == 200
    return client
