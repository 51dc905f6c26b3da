"""
Met collection features as consumed by the API views.

`list_artists` may fail when there is nothing cached to fall back on.
`list_works_by_artist` never fails: the public gallery shows an empty list
instead of an error when the Met is flaky.
"""

import logging

from pydantic import ValidationError

from museum.src.constants.met import (
    DEFAULT_WORKS_LIMIT,
    OBJECT_TIMEOUT,
    PUBLIC_SAMPLE_QUERY,
    PUBLIC_SAMPLE_SIZE,
    SEARCH_TIMEOUT,
)
from museum.src.services.met.artist_cache import ArtistCache
from museum.src.services.met.artist_ids import decode_artist_id
from museum.src.services.met.errors import (
    InvalidArtistId,
    MetAPIError,
    UpstreamUnavailable,
)
from museum.src.services.met.met_api_client import METAPIClient
from museum.src.services.met.models import (
    ArtistEntry,
    MetObjectRecord,
    WorkDetail,
    normalize_work,
)
from museum.src.services.met.timeout_guard import (
    gather_with_timeout,
    successful_values,
    with_timeout,
)
from museum.src.services.met.work_aggregator import works_by_artist

logger = logging.getLogger(__name__)


def list_artists(artist_cache: ArtistCache) -> list[ArtistEntry]:
    return artist_cache.get_artists()


def resolve_artist_name(id_or_name: str) -> str:
    """Decode an artist id; anything that does not decode is taken as a plain name."""
    try:
        return decode_artist_id(id_or_name)
    except InvalidArtistId:
        return id_or_name


def list_works_by_artist(
    client: METAPIClient, id_or_name: str, limit: int = DEFAULT_WORKS_LIMIT
) -> list[WorkDetail]:
    name = resolve_artist_name(id_or_name or "")
    try:
        return works_by_artist(client, name, max_results=limit)
    except MetAPIError as e:
        logger.error(f"Error fetching works for artist {name!r}: {e}")
        return []


def sample_public_works(
    client: METAPIClient, limit: int = PUBLIC_SAMPLE_SIZE
) -> list[WorkDetail]:
    """
    A handful of Met works with images, for the public gallery.

    Raises:
        UpstreamUnavailable: The sample search failed
    """
    try:
        object_ids = with_timeout(
            lambda: client.search_object_ids(
                PUBLIC_SAMPLE_QUERY, artist_or_culture=False
            ),
            SEARCH_TIMEOUT,
        )
    except MetAPIError as e:
        raise UpstreamUnavailable(f"Public art search failed: {e}") from e

    outcomes = gather_with_timeout(
        [
            (object_id, lambda object_id=object_id: client.get_object(object_id))
            for object_id in object_ids[:limit]
        ],
        timeout=OBJECT_TIMEOUT,
    )

    works = []
    for raw_record in successful_values(outcomes):
        try:
            work = normalize_work(MetObjectRecord.model_validate(raw_record))
        except ValidationError as e:
            logger.warning(f"Error processing object record: {e}")
            continue
        if work is not None:
            works.append(work)

    if not works:
        logger.info("No public works with images found")
    return works
