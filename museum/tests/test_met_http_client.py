"""
Unit tests for the JSON fetcher and the Met API client.

HTTP is mocked at the requests.Session level, or at the socket for the
adapter retry policy.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from museum.src.services.met.errors import ParseError, TransportError
from museum.src.services.met.http_client import fetch_json
from museum.src.services.met.met_api_client import METAPIClient
from museum.src.utils.session_config import get_configured_session

BASE_URL = "https://met.example.com/v1"


def _response(json_data=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.mark.unit
class TestFetchJson:
    def test_returns_parsed_body(self):
        session = MagicMock()
        session.get.return_value = _response({"objectIDs": [1, 2]})

        data = fetch_json(f"{BASE_URL}/search", session, params={"q": "x"}, timeout=4)

        assert data == {"objectIDs": [1, 2]}
        session.get.assert_called_once_with(
            f"{BASE_URL}/search", params={"q": "x"}, timeout=4
        )

    def test_connection_error_is_transport_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(TransportError):
            fetch_json(f"{BASE_URL}/objects/1", session)

    def test_error_status_is_transport_error(self):
        session = MagicMock()
        session.get.return_value = _response(
            status_error=requests.HTTPError("503 Service Unavailable")
        )

        with pytest.raises(TransportError, match="503"):
            fetch_json(f"{BASE_URL}/objects/1", session)

    def test_invalid_json_is_parse_error(self):
        session = MagicMock()
        session.get.return_value = _response(
            json_error=requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        )

        with pytest.raises(ParseError):
            fetch_json(f"{BASE_URL}/objects/1", session)

    def test_single_attempt(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError):
            fetch_json(f"{BASE_URL}/objects/1", session)

        assert session.get.call_count == 1

    def test_configured_session_makes_one_connection_attempt(self):
        session = get_configured_session()
        session.trust_env = False

        with patch(
            "urllib3.util.connection.create_connection",
            side_effect=ConnectionRefusedError("connection refused"),
        ) as create_connection:
            with pytest.raises(TransportError):
                fetch_json("http://127.0.0.1:9/search", session, timeout=1)

        assert create_connection.call_count == 1
        assert session.get_adapter("https://met.example.com").max_retries.total == 0


@pytest.mark.unit
class TestMETAPIClient:
    def test_search_sends_artist_filters_with_query_last(self):
        session = MagicMock()
        session.get.return_value = _response({"total": 2, "objectIDs": [5, 7]})
        client = METAPIClient(base_url=BASE_URL, http_session=session)

        object_ids = client.search_object_ids("Claude Monet")

        assert object_ids == [5, 7]
        url = session.get.call_args[0][0]
        params = session.get.call_args[1]["params"]
        assert url == f"{BASE_URL}/search"
        assert params == {
            "hasImages": "true",
            "artistOrCulture": "true",
            "q": "Claude Monet",
        }
        assert list(params)[-1] == "q"

    def test_search_without_artist_filter(self):
        session = MagicMock()
        session.get.return_value = _response({"total": 1, "objectIDs": [1]})
        client = METAPIClient(base_url=BASE_URL, http_session=session)

        client.search_object_ids("*", artist_or_culture=False)

        params = session.get.call_args[1]["params"]
        assert "artistOrCulture" not in params

    def test_search_with_no_hits_returns_empty_list(self):
        session = MagicMock()
        session.get.return_value = _response({"total": 0, "objectIDs": None})
        client = METAPIClient(base_url=BASE_URL, http_session=session)

        assert client.search_object_ids("nobody") == []

    def test_search_with_non_object_body_is_parse_error(self):
        session = MagicMock()
        session.get.return_value = _response([1, 2, 3])
        client = METAPIClient(base_url=BASE_URL, http_session=session)

        with pytest.raises(ParseError):
            client.search_object_ids("x")

    def test_get_object_fetches_object_url(self):
        session = MagicMock()
        session.get.return_value = _response({"objectID": 436535, "title": "Wheat Field"})
        client = METAPIClient(base_url=BASE_URL + "/", http_session=session)

        record = client.get_object(436535)

        assert record["title"] == "Wheat Field"
        assert session.get.call_args[0][0] == f"{BASE_URL}/objects/436535"
