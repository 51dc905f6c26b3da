import logging

from pydantic import ValidationError

from museum.src.constants.met import (
    DEFAULT_WORKS_LIMIT,
    OBJECT_TIMEOUT,
    SEARCH_TIMEOUT,
    WORK_ID_CAP,
)
from museum.src.services.met.errors import MetAPIError, UpstreamUnavailable
from museum.src.services.met.met_api_client import METAPIClient
from museum.src.services.met.models import MetObjectRecord, WorkDetail, normalize_work
from museum.src.services.met.timeout_guard import with_timeout

logger = logging.getLogger(__name__)


def works_by_artist(
    client: METAPIClient,
    display_name: str | None,
    max_results: int = DEFAULT_WORKS_LIMIT,
    id_cap: int = WORK_ID_CAP,
    search_timeout: float = SEARCH_TIMEOUT,
    object_timeout: float = OBJECT_TIMEOUT,
) -> list[WorkDetail]:
    """
    Collect up to `max_results` works with images for an artist.

    Object records are fetched one at a time in search order, and fetching
    stops as soon as enough works are collected. Records that fail to load or
    have no image are skipped.

    Raises:
        UpstreamUnavailable: The artist search itself failed
    """
    name = (display_name or "").strip()
    if not name or max_results <= 0:
        return []

    try:
        object_ids = with_timeout(
            lambda: client.search_object_ids(name), search_timeout
        )
    except MetAPIError as e:
        raise UpstreamUnavailable(f"Artist search for {name!r} failed: {e}") from e

    object_ids = object_ids[:id_cap]
    logger.info(f"Artist {name!r}: {len(object_ids)} objects found")

    works: list[WorkDetail] = []
    for object_id in object_ids:
        if len(works) >= max_results:
            break
        try:
            raw_record = with_timeout(
                lambda object_id=object_id: client.get_object(object_id),
                object_timeout,
            )
            record = MetObjectRecord.model_validate(raw_record)
        except (MetAPIError, ValidationError) as e:
            logger.warning(f"Error fetching object {object_id}: {e}")
            continue

        work = normalize_work(record)
        if work is None:
            continue
        works.append(work)

    logger.info(f"Returning {len(works)} works for artist {name!r}")
    return works
