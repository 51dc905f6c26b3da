class CatalogError(Exception):
    """Base class for catalog store errors."""

    pass


class ItemNotFound(CatalogError):
    pass


class CollectionNotFound(CatalogError):
    pass


class CatalogValidationError(CatalogError):
    """A payload is incomplete or has an invalid value."""

    pass


class DuplicateCollection(CatalogError):
    pass


class CollectionInUse(CatalogError):
    """A collection cannot be deleted while items still reference it."""

    def __init__(self, collection_name: str, item_count: int):
        self.collection_name = collection_name
        self.item_count = item_count
        super().__init__(
            f"Cannot delete the collection. {item_count} item(s) are "
            f"associated with it."
        )
