"""
Time-boxed cache of the resolved artist list.

The cache holds one immutable generation. A successful recompute replaces it
with a single reference assignment, so concurrent readers see either the old
or the new generation, never a mix. A failed recompute keeps the old
generation and serves it (serve-stale-on-error).
"""

import logging
import math
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from museum.src.services.met.errors import MetAPIError
from museum.src.services.met.models import ArtistEntry

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"


@dataclass(frozen=True)
class ArtistCacheGeneration:
    entries: tuple[ArtistEntry, ...]
    computed_at: float


class ArtistCache:
    def __init__(
        self,
        resolver: Callable[[], list[ArtistEntry]],
        validity_window: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._resolve = resolver
        self.validity_window = validity_window
        self._clock = clock
        self._generation: ArtistCacheGeneration | None = None

    @property
    def state(self) -> CacheState:
        generation = self._generation
        if generation is None:
            return CacheState.EMPTY
        if self._clock() - generation.computed_at < self.validity_window:
            return CacheState.FRESH
        return CacheState.STALE

    def get_artists(self) -> list[ArtistEntry]:
        """
        Return the cached artists, recomputing them once the validity window elapsed.

        Raises:
            MetAPIError: Recompute failed and there is no previous generation to serve
        """
        generation = self._generation
        now = self._clock()
        if generation is not None and now - generation.computed_at < self.validity_window:
            logger.debug("Returning artists from cache")
            return list(generation.entries)

        try:
            entries = self._resolve()
        except MetAPIError as e:
            if generation is None:
                logger.error(f"Could not load artists and no cached list exists: {e}")
                raise
            logger.warning(f"Could not refresh artists, serving stale cache: {e}")
            return list(generation.entries)

        self._generation = ArtistCacheGeneration(entries=tuple(entries), computed_at=now)
        logger.info(f"Artist cache refreshed with {len(entries)} artists")
        return list(entries)

    def invalidate(self) -> None:
        """Mark the current generation stale. Its entries stay available as a fallback."""
        generation = self._generation
        if generation is not None:
            self._generation = replace(generation, computed_at=-math.inf)
