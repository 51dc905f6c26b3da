from django.urls import path

from museum.api.views import (
    api_index_view,
    artist_works_view,
    artists_view,
    collection_detail_view,
    collection_items_view,
    collections_view,
    item_detail_view,
    items_view,
    public_art_view,
)

urlpatterns = [
    path("", api_index_view),
    path("items/", items_view),
    path("items/<int:item_id>/", item_detail_view),
    path("collections/", collections_view),
    path("collections/<int:collection_id>/", collection_detail_view),
    path("collections/<str:collection_name>/items/", collection_items_view),
    path("public-art/", public_art_view),
    path("public-art/artists/", artists_view),
    path("public-art/artists/<str:artist_id>/works/", artist_works_view),
]
