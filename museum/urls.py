import museum.views.views as views
from django.urls import path


urlpatterns = [
    path("", views.home_view, name="home"),
    path("admin/", views.admin_view, name="admin"),
    path("login/", views.login_view, name="login"),
    path("logout/", views.logout_view, name="logout"),
    path("auth/google/", views.google_auth_view, name="google-auth"),
]
