from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from museum.src.constants.catalog import (
    COLLECTION_REQUIRED_FIELDS,
    HEX_COLOR_PATTERN,
    ITEM_REQUIRED_FIELDS,
)
from museum.src.services.catalog.errors import CatalogValidationError


class Item(BaseModel):
    id: int
    title: str
    description: str
    category: str
    collection: str
    photo: str
    year: int
    cultural_context: str
    historical_period: str
    material: str
    dimensions: str


class Collection(BaseModel):
    id: int
    name: str
    description: str
    color: str


class _TrimmedPayload(BaseModel):
    """Incoming form data: every value becomes trimmed text, missing values become ''."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def _missing(self, required_fields: list[str]) -> list[str]:
        return [
            field.replace("_", " ")
            for field in required_fields
            if not getattr(self, field)
        ]

    @staticmethod
    def _raise_if_missing(missing: list[str]) -> None:
        if missing:
            raise CatalogValidationError(
                "Incomplete data. The following fields are required: "
                f"{', '.join(missing)}."
            )


class ItemPayload(_TrimmedPayload):
    title: str = ""
    description: str = ""
    category: str = ""
    collection: str = ""
    photo: str = ""
    year: str = ""
    cultural_context: str = ""
    historical_period: str = ""
    material: str = ""
    dimensions: str = ""

    def to_item(self, item_id: int) -> Item:
        """
        Validate the payload and build the stored item.

        Raises:
            CatalogValidationError: A field is empty, or the year is not a
                whole number between 0 and the current year
        """
        self._raise_if_missing(self._missing(ITEM_REQUIRED_FIELDS))

        try:
            year = int(self.year)
        except ValueError:
            year = None
        if year is None or year < 0 or year > date.today().year:
            raise CatalogValidationError(
                "Year must be a valid number between 0 and the current year."
            )

        return Item(id=item_id, **self.model_dump(exclude={"year"}), year=year)


class CollectionPayload(_TrimmedPayload):
    name: str = ""
    description: str = ""
    color: str = ""

    def to_collection(self, collection_id: int) -> Collection:
        """
        Raises:
            CatalogValidationError: A field is empty, or color is not #RRGGBB
        """
        self._raise_if_missing(self._missing(COLLECTION_REQUIRED_FIELDS))

        if not HEX_COLOR_PATTERN.match(self.color):
            raise CatalogValidationError(
                "Color must be a valid hexadecimal value (e.g. #FF0000)."
            )
        return Collection(id=collection_id, **self.model_dump())
