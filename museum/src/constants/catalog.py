import re

# Required fields, in the order they are reported when missing
ITEM_REQUIRED_FIELDS = [
    "title",
    "description",
    "category",
    "collection",
    "photo",
    "year",
    "cultural_context",
    "historical_period",
    "material",
    "dimensions",
]

COLLECTION_REQUIRED_FIELDS = ["name", "description", "color"]

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
