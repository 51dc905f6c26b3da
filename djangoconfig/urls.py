from django.urls import include, path

urlpatterns = [
    path("api/", include("museum.api.urls")),
    path("", include("museum.urls")),
]
