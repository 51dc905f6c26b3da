"""
Resolve a free-text seed into a validated list of Met artists.

The seed search yields many names that have no retrievable works, so every
candidate is checked with its own artist search before it is kept. That is
one extra upstream request per candidate; the candidate cap keeps it bounded.
"""

import logging
import time
from typing import Any

from pydantic import ValidationError

from museum.src.constants.met import (
    ARTIST_CANDIDATE_CAP,
    MAX_ARTISTS,
    OBJECT_TIMEOUT,
    SEARCH_TIMEOUT,
)
from museum.src.services.met.artist_ids import encode_artist_id
from museum.src.services.met.errors import MetAPIError, UpstreamUnavailable
from museum.src.services.met.met_api_client import METAPIClient
from museum.src.services.met.models import ArtistEntry, MetArtistFields
from museum.src.services.met.timeout_guard import (
    gather_with_timeout,
    successful_values,
    with_timeout,
)

logger = logging.getLogger(__name__)


def extract_artist_names(records: list[dict[str, Any]]) -> list[str]:
    """Unique, non-empty artist names in first-seen order."""
    names: list[str] = []
    seen: set[str] = set()
    for raw_record in records:
        try:
            record = MetArtistFields.model_validate(raw_record)
        except ValidationError as e:
            logger.debug(f"Skipping record with malformed artist fields: {e}")
            continue
        name = record.artist_name
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names


def validate_candidates(
    client: METAPIClient, names: list[str], timeout: float = OBJECT_TIMEOUT
) -> list[str]:
    """Keep the names whose own artist search returns at least one object."""
    outcomes = gather_with_timeout(
        [(name, lambda name=name: client.search_object_ids(name)) for name in names],
        timeout=timeout,
    )
    validated = []
    for outcome in outcomes:
        if not outcome.ok:
            logger.info(f"! Could not validate {outcome.key}: {outcome.error}")
        elif outcome.value:
            logger.debug(f"{outcome.key} has {len(outcome.value)} works")
            validated.append(outcome.key)
        else:
            logger.debug(f"{outcome.key} has no works")
    return validated


def search_artists(
    client: METAPIClient,
    seed_query: str,
    candidate_cap: int = ARTIST_CANDIDATE_CAP,
    max_artists: int = MAX_ARTISTS,
    search_timeout: float = SEARCH_TIMEOUT,
    object_timeout: float = OBJECT_TIMEOUT,
) -> list[ArtistEntry]:
    """
    Search the Met for artists related to `seed_query`.

    Steps:
      1. One seed search; at most `candidate_cap` object IDs are examined
      2. Detail records are fetched in parallel; failed fetches are dropped
      3. Artist names are extracted and deduplicated
      4. Each name is validated with its own search; failures exclude the name
      5. Names are sorted, capped at `max_artists` and given reversible ids

    Raises:
        UpstreamUnavailable: The seed search failed (transport, parse or timeout)
    """
    start_time = time.time()

    try:
        object_ids = with_timeout(
            lambda: client.search_object_ids(seed_query), search_timeout
        )
    except MetAPIError as e:
        raise UpstreamUnavailable(f"Seed search for {seed_query!r} failed: {e}") from e

    object_ids = object_ids[:candidate_cap]
    logger.info(f"Seed search {seed_query!r}: examining {len(object_ids)} objects")

    outcomes = gather_with_timeout(
        [
            (object_id, lambda object_id=object_id: client.get_object(object_id))
            for object_id in object_ids
        ],
        timeout=object_timeout,
    )
    for outcome in outcomes:
        if not outcome.ok:
            logger.debug(f"No data for object {outcome.key}: {outcome.error}")

    candidates = extract_artist_names(successful_values(outcomes))
    logger.info(f"Validating {len(candidates)} candidate artists")

    validated = validate_candidates(client, candidates, timeout=object_timeout)

    entries = [
        ArtistEntry(id=encode_artist_id(name), display_name=name)
        for name in sorted(validated)[:max_artists]
    ]

    elapsed = (time.time() - start_time) * 1000
    logger.info(f"[TIMING] search_artists - {len(entries)} artists: {elapsed:.2f}ms")
    return entries
