"""
Memoized service factories, keyed by name, so the shared Met client, artist
cache and catalog store can be rebuilt on demand (tests reset them between
cases).

Apply `register_cache` on top of `lru_cache`:

    @register_cache
    @lru_cache(maxsize=1)
    def get_artist_cache() -> ArtistCache:
        ...
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

_factories: dict[str, Callable[..., Any]] = {}


def register_cache(factory: Callable[..., Any]) -> Callable[..., Any]:
    if not hasattr(factory, "cache_clear"):
        raise TypeError(f"{factory.__name__} must be decorated with @lru_cache first")
    _factories[f"{factory.__module__}.{factory.__qualname__}"] = factory
    return factory


def clear_all_caches() -> list[str]:
    """Drop every memoized service instance. Returns the names of the factories that held one."""
    cleared = []
    for name, factory in _factories.items():
        if factory.cache_info().currsize:
            cleared.append(name)
        factory.cache_clear()
    if cleared:
        logger.debug(f"Reset service instances: {', '.join(cleared)}")
    return cleared
