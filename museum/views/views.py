import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from museum.src.config import config
from museum.src.constants.met import GALLERY_WORKS_LIMIT
from museum.views.auth import (
    InvalidCredential,
    admin_page_required,
    decode_jwt_payload,
    get_session_user,
    login_session_user,
)
from museum.views.utils import InvalidRequestBody, parse_json_body

logger = logging.getLogger(__name__)


@require_GET
def home_view(request: HttpRequest) -> HttpResponse:
    """Public gallery: the museum's own items plus works fetched from the Met."""
    return render(
        request, "index.html", {"gallery_works_limit": GALLERY_WORKS_LIMIT}
    )


@require_GET
@admin_page_required
def admin_view(request: HttpRequest) -> HttpResponse:
    return render(request, "admin.html", {"user": get_session_user(request)})


@require_GET
def login_view(request: HttpRequest) -> HttpResponse:
    if get_session_user(request):
        return redirect("admin")
    return render(request, "login.html", {"google_client_id": config.google_client_id})


@require_POST
def google_auth_view(request: HttpRequest) -> JsonResponse:
    """Exchange a Google Identity Services credential for an admin session."""
    try:
        body = parse_json_body(request)
    except InvalidRequestBody as e:
        return JsonResponse({"error": str(e)}, status=400)

    credential = (body.get("credential") or "").strip()
    if not credential:
        return JsonResponse({"error": "Could not obtain the Google token"}, status=400)

    try:
        payload = decode_jwt_payload(credential)
    except InvalidCredential as e:
        logger.warning(f"Rejected Google credential: {e}")
        return JsonResponse({"error": "Invalid Google token"}, status=400)

    user = login_session_user(request, payload)
    logger.info(f"Admin login: {user['email']}")
    return JsonResponse({"user": user})


@require_POST
def logout_view(request: HttpRequest) -> HttpResponse:
    request.session.flush()
    return redirect("login")
