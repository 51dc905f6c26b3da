import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_http_methods
from django_ratelimit.decorators import ratelimit

from museum.src.constants.met import DEFAULT_WORKS_LIMIT, MAX_WORKS_LIMIT
from museum.src.services.catalog.errors import (
    CatalogValidationError,
    CollectionInUse,
    CollectionNotFound,
    DuplicateCollection,
    ItemNotFound,
)
from museum.src.services.met.errors import MetAPIError
from museum.src.services.met.met_service import (
    list_artists,
    list_works_by_artist,
    sample_public_works,
)
from museum.src.services.service_factory import (
    get_artist_cache,
    get_catalog_store,
    get_met_client,
)
from museum.views.auth import admin_required
from museum.views.utils import (
    InvalidRequestBody,
    get_client_ip,
    parse_json_body,
    parse_limit,
)

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "/api/items/",
    "/api/items/<id>/",
    "/api/collections/",
    "/api/collections/<name>/items/",
    "/api/public-art/",
    "/api/public-art/artists/",
    "/api/public-art/artists/<artist_id>/works/",
]


def _error(message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": message}, status=status)


def _too_many_requests() -> JsonResponse:
    return _error("Too many requests. Please try again later.", 429)


@require_GET
def api_index_view(request):
    return JsonResponse({
        "ok": True,
        "message": "Museum API is running",
        "endpoints": ENDPOINTS,
    })


# ---- Items ----


@require_http_methods(["GET", "POST"])
def items_view(request):
    if request.method == "POST":
        return _create_item(request)
    items = get_catalog_store().list_items()
    return JsonResponse([item.model_dump() for item in items], safe=False)


@admin_required
def _create_item(request):
    try:
        payload = parse_json_body(request)
        item = get_catalog_store().create_item(payload)
    except (InvalidRequestBody, CatalogValidationError) as e:
        return _error(str(e), 400)
    return JsonResponse(item.model_dump(), status=201)


@require_http_methods(["GET", "PUT", "DELETE"])
def item_detail_view(request, item_id: int):
    if request.method == "PUT":
        return _update_item(request, item_id)
    if request.method == "DELETE":
        return _delete_item(request, item_id)
    try:
        item = get_catalog_store().get_item(item_id)
    except ItemNotFound:
        return _error("Item not found", 404)
    return JsonResponse(item.model_dump())


@admin_required
def _update_item(request, item_id: int):
    try:
        payload = parse_json_body(request)
        item = get_catalog_store().update_item(item_id, payload)
    except ItemNotFound:
        return _error("Item not found", 404)
    except (InvalidRequestBody, CatalogValidationError) as e:
        return _error(str(e), 400)
    return JsonResponse(item.model_dump())


@admin_required
def _delete_item(request, item_id: int):
    try:
        get_catalog_store().delete_item(item_id)
    except ItemNotFound:
        return _error("Item not found", 404)
    return JsonResponse({"message": "Item deleted successfully"})


# ---- Collections ----


@require_http_methods(["GET", "POST"])
def collections_view(request):
    if request.method == "POST":
        return _create_collection(request)
    collections = get_catalog_store().list_collections()
    return JsonResponse([c.model_dump() for c in collections], safe=False)


@admin_required
def _create_collection(request):
    try:
        payload = parse_json_body(request)
        collection = get_catalog_store().create_collection(payload)
    except (InvalidRequestBody, CatalogValidationError, DuplicateCollection) as e:
        return _error(str(e), 400)
    return JsonResponse(collection.model_dump(), status=201)


@require_http_methods(["PUT", "DELETE"])
def collection_detail_view(request, collection_id: int):
    if request.method == "PUT":
        return _update_collection(request, collection_id)
    return _delete_collection(request, collection_id)


@admin_required
def _update_collection(request, collection_id: int):
    try:
        payload = parse_json_body(request)
        collection = get_catalog_store().update_collection(collection_id, payload)
    except CollectionNotFound:
        return _error("Collection not found", 404)
    except (InvalidRequestBody, CatalogValidationError, DuplicateCollection) as e:
        return _error(str(e), 400)
    return JsonResponse(collection.model_dump())


@admin_required
def _delete_collection(request, collection_id: int):
    try:
        get_catalog_store().delete_collection(collection_id)
    except CollectionNotFound:
        return _error("Collection not found", 404)
    except CollectionInUse as e:
        return _error(str(e), 400)
    return JsonResponse({"message": "Collection deleted successfully"})


@require_GET
def collection_items_view(request, collection_name: str):
    items = get_catalog_store().items_in_collection(collection_name)
    return JsonResponse([item.model_dump() for item in items], safe=False)


# ---- Met collection ----


@require_GET
@ratelimit(key=get_client_ip, rate="30/m", method="GET", block=False)
def public_art_view(request):
    if getattr(request, "limited", False):
        return _too_many_requests()

    try:
        works = sample_public_works(get_met_client())
    except MetAPIError as e:
        logger.error(f"Error fetching public art: {e}")
        return _error("Error fetching data from the public API", 500)
    return JsonResponse([work.to_json() for work in works], safe=False)


@require_GET
@ratelimit(key=get_client_ip, rate="30/m", method="GET", block=False)
def artists_view(request):
    if getattr(request, "limited", False):
        return _too_many_requests()

    try:
        artists = list_artists(get_artist_cache())
    except MetAPIError as e:
        logger.error(f"Error loading artists from the public API: {e}")
        return _error("Error loading artists from the public API", 500)
    return JsonResponse([artist.to_json() for artist in artists], safe=False)


@require_GET
@ratelimit(key=get_client_ip, rate="60/m", method="GET", block=False)
def artist_works_view(request, artist_id: str):
    if getattr(request, "limited", False):
        return _too_many_requests()

    limit = parse_limit(request, default=DEFAULT_WORKS_LIMIT, maximum=MAX_WORKS_LIMIT)
    works = list_works_by_artist(get_met_client(), artist_id, limit=limit)
    return JsonResponse([work.to_json() for work in works], safe=False)
