from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from museum.src.constants.met import UNKNOWN_ARTIST, UNKNOWN_DATE, UNTITLED


class MetArtistFields(BaseModel):
    """The artist fields of a Met object record. Nothing else is required."""

    model_config = ConfigDict(extra="ignore")

    artistDisplayName: Optional[str] = None
    artistAlphaSort: Optional[str] = None

    @property
    def artist_name(self) -> str:
        """Structured artist name, falling back to the alphabetized sort name."""
        return (self.artistDisplayName or self.artistAlphaSort or "").strip()


class MetObjectRecord(MetArtistFields):
    """The subset of a Met object record we read. Unknown fields are ignored."""

    objectID: int
    title: Optional[str] = None
    objectDate: Optional[str] = None
    objectBeginDate: Optional[int] = None
    primaryImage: Optional[str] = None
    primaryImageSmall: Optional[str] = None
    culture: Optional[str] = None
    classification: Optional[str] = None
    period: Optional[str] = None
    department: Optional[str] = None
    medium: Optional[str] = None
    dimensions: Optional[str] = None

    @field_validator("objectBeginDate", mode="before")
    @classmethod
    def _blank_year_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @property
    def image_url(self) -> str:
        """Small image variant, falling back to the primary image."""
        return (self.primaryImageSmall or self.primaryImage or "").strip()


class WorkDetail(BaseModel):
    """A normalized Met work. Always carries an image."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: int
    title: str
    artist_name: str
    date_display: str
    image_url: str
    culture: Optional[str] = None
    period: Optional[str] = None
    department: Optional[str] = None
    medium: Optional[str] = None
    dimensions: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ArtistEntry(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    display_name: str

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_work(record: MetObjectRecord) -> WorkDetail | None:
    """Turn an upstream record into a WorkDetail, or None when it has no usable image."""
    image_url = record.image_url
    if not image_url:
        return None

    begin_year = (
        str(record.objectBeginDate) if record.objectBeginDate is not None else None
    )
    date_display = _blank_to_none(record.objectDate) or begin_year or UNKNOWN_DATE

    return WorkDetail(
        id=record.objectID,
        title=_blank_to_none(record.title) or UNTITLED,
        artist_name=record.artist_name or UNKNOWN_ARTIST,
        date_display=date_display,
        image_url=image_url,
        culture=_blank_to_none(record.culture) or _blank_to_none(record.classification),
        period=_blank_to_none(record.period)
        or begin_year
        or _blank_to_none(record.objectDate),
        department=_blank_to_none(record.department),
        medium=_blank_to_none(record.medium),
        dimensions=_blank_to_none(record.dimensions),
    )
