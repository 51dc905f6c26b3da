"""Reversible opaque ids for artist display names."""

import base64
import binascii
import re

from museum.src.services.met.errors import InvalidArtistId

_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]+={0,2}$")


def encode_artist_id(display_name: str) -> str:
    """URL-safe base64 of the UTF-8 name, so ids fit in a path segment."""
    return base64.urlsafe_b64encode(display_name.encode("utf-8")).decode("ascii")


def decode_artist_id(artist_id: str) -> str:
    """Inverse of encode_artist_id.

    Also accepts the standard base64 alphabet and missing padding. Only
    canonical encodings of a printable name are ids: a plain name such as
    "Titian" is well-formed base64 but does not re-encode to itself, so it
    is rejected.

    Raises:
        InvalidArtistId: The value is not an id produced by encode_artist_id
    """
    token = artist_id.strip().replace("+", "-").replace("/", "_")
    if not _TOKEN_PATTERN.match(token):
        raise InvalidArtistId(f"Invalid artist id: {artist_id!r}")

    unpadded = token.rstrip("=")
    try:
        raw = base64.urlsafe_b64decode(unpadded + "=" * (-len(unpadded) % 4))
        name = raw.decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise InvalidArtistId(f"Invalid artist id: {artist_id!r}") from e

    if encode_artist_id(name).rstrip("=") != unpadded:
        raise InvalidArtistId(f"Not a canonical artist id: {artist_id!r}")
    if not name.strip() or not name.isprintable():
        raise InvalidArtistId(f"Artist id does not hold a name: {artist_id!r}")
    return name
