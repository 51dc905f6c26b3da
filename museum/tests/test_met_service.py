import pytest

from museum.src.services.met.artist_ids import encode_artist_id
from museum.src.services.met.errors import TransportError, UpstreamUnavailable
from museum.src.services.met.met_service import (
    list_works_by_artist,
    resolve_artist_name,
    sample_public_works,
)


@pytest.mark.unit
class TestListWorksByArtist:
    def test_decodes_artist_id(self, fake_met_client, met_record):
        client = fake_met_client(
            searches={"Mary Cassatt": [1]},
            objects={1: met_record(1, artist="Mary Cassatt")},
        )

        works = list_works_by_artist(client, encode_artist_id("Mary Cassatt"), limit=6)

        assert client.search_calls == ["Mary Cassatt"]
        assert [work.artist_name for work in works] == ["Mary Cassatt"]

    def test_upstream_failure_returns_empty_list(self, fake_met_client):
        client = fake_met_client(
            searches={"Mary Cassatt": TransportError("connection refused")}
        )

        assert list_works_by_artist(client, encode_artist_id("Mary Cassatt")) == []

    def test_empty_id_returns_empty_list_without_calls(self, fake_met_client):
        client = fake_met_client()

        assert list_works_by_artist(client, "", limit=6) == []
        assert client.search_calls == []


@pytest.mark.unit
def test_undecodable_id_is_taken_as_a_plain_name():
    assert resolve_artist_name("Dürer") == "Dürer"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["Titian", "Ingres", "Inca"])
def test_plain_names_are_searched_verbatim(fake_met_client, met_record, name):
    client = fake_met_client(
        searches={name: [1]},
        objects={1: met_record(1, artist=name)},
    )

    works = list_works_by_artist(client, name, limit=6)

    assert client.search_calls == [name]
    assert [work.artist_name for work in works] == [name]


@pytest.mark.unit
class TestSamplePublicWorks:
    def test_returns_works_with_images_only(self, fake_met_client, met_record):
        client = fake_met_client(
            searches={"*": [1, 2, 3, 4]},
            objects={
                1: met_record(1),
                2: met_record(2, image=False),
                3: TransportError("gone"),
                4: met_record(4),
            },
        )

        works = sample_public_works(client, limit=10)

        assert sorted(work.id for work in works) == [1, 4]

    def test_fetches_at_most_limit_objects(self, fake_met_client, met_record):
        object_ids = list(range(1, 30))
        client = fake_met_client(
            searches={"*": object_ids},
            objects={i: met_record(i) for i in object_ids},
        )

        works = sample_public_works(client, limit=10)

        assert len(works) == 10
        assert sorted(client.object_calls) == list(range(1, 11))

    def test_search_failure_raises(self, fake_met_client):
        client = fake_met_client(searches={"*": TransportError("down")})

        with pytest.raises(UpstreamUnavailable):
            sample_public_works(client)
