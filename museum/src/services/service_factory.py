"""
Process-wide service instances, built once and handed to the views.

The artist cache lives here rather than in module globals of the Met
services, so every view works against one explicitly owned instance.
"""

from functools import lru_cache, partial

from django.conf import settings

from museum.src.cache_registry import register_cache
from museum.src.config import config
from museum.src.services.catalog.store import JsonCatalogStore
from museum.src.services.met.artist_cache import ArtistCache
from museum.src.services.met.artist_resolver import search_artists
from museum.src.services.met.met_api_client import METAPIClient


@register_cache
@lru_cache(maxsize=1)
def get_met_client() -> METAPIClient:
    return METAPIClient(base_url=config.met_api_base_url)


@register_cache
@lru_cache(maxsize=1)
def get_artist_cache() -> ArtistCache:
    return ArtistCache(
        resolver=partial(search_artists, get_met_client(), config.artist_seed_query),
        validity_window=config.artist_cache_ttl_seconds,
    )


@register_cache
@lru_cache(maxsize=1)
def get_catalog_store() -> JsonCatalogStore:
    return JsonCatalogStore(settings.CATALOG_DATA_FILE)
