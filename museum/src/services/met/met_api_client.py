from typing import Any, Optional

import requests

from museum.src.config import config
from museum.src.services.met.errors import ParseError
from museum.src.services.met.http_client import fetch_json
from museum.src.utils.session_config import get_configured_session


class METAPIClient:
    """Read-only client for the Met collection API."""

    def __init__(
        self,
        base_url: str | None = None,
        http_session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.met_api_base_url).rstrip("/")
        self.http_session = http_session or get_configured_session()

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    def get_object_url(self, object_id: int) -> str:
        return f"{self.base_url}/objects/{object_id}"

    def search_object_ids(
        self, query: str, artist_or_culture: bool = True
    ) -> list[int]:
        """Search the collection for objects with images matching `query`.

        The Met returns `{"total": 0, "objectIDs": null}` when nothing matches,
        which is reported as an empty list.
        """
        params = {"hasImages": "true"}
        if artist_or_culture:
            params["artistOrCulture"] = "true"
        # q has to come last, otherwise the Met ignores the other filters
        params["q"] = query

        data = fetch_json(self.search_url, self.http_session, params=params)
        if not isinstance(data, dict):
            raise ParseError(f"Unexpected search response type: {type(data).__name__}")
        return list(data.get("objectIDs") or [])

    def get_object(self, object_id: int) -> dict[str, Any]:
        """Fetch the raw detail record of one object."""
        data = fetch_json(self.get_object_url(object_id), self.http_session)
        if not isinstance(data, dict):
            raise ParseError(
                f"Unexpected object response type for {object_id}: {type(data).__name__}"
            )
        return data
