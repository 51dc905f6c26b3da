import pytest

from museum.src.cache_registry import clear_all_caches, register_cache
from museum.src.services.service_factory import (
    get_artist_cache,
    get_catalog_store,
    get_met_client,
)


@pytest.mark.unit
def test_factories_share_one_instance_until_cleared():
    cache = get_artist_cache()
    assert get_artist_cache() is cache
    assert get_met_client() is get_met_client()

    cleared = clear_all_caches()

    assert "museum.src.services.service_factory.get_artist_cache" in cleared
    assert get_artist_cache() is not cache


@pytest.mark.unit
def test_catalog_store_reads_the_configured_file(catalog_file):
    assert get_catalog_store().path == catalog_file


@pytest.mark.unit
def test_clearing_reports_only_factories_that_held_an_instance():
    clear_all_caches()
    get_met_client()

    assert clear_all_caches() == ["museum.src.services.service_factory.get_met_client"]


@pytest.mark.unit
def test_register_requires_lru_cache():
    def plain_factory():
        return object()

    with pytest.raises(TypeError):
        register_cache(plain_factory)
