"""
Google-login gating for the admin area.

The Google Identity Services credential is a JWT. Its payload is decoded to
read the user's name, email and picture; the signature is not verified.
"""

import base64
import binascii
import json
from functools import wraps
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.shortcuts import redirect

SESSION_USER_KEY = "google_user"


class InvalidCredential(ValueError):
    pass


def decode_jwt_payload(credential: str) -> dict[str, Any]:
    """Return the decoded payload segment of a JWT."""
    parts = credential.split(".")
    if len(parts) != 3:
        raise InvalidCredential("Credential is not a JWT")

    segment = parts[1]
    segment += "=" * (-len(segment) % 4)
    try:
        payload = json.loads(base64.urlsafe_b64decode(segment.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise InvalidCredential(f"Credential payload could not be decoded: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidCredential("Credential payload is not a JSON object")
    return payload


def get_session_user(request: HttpRequest) -> dict[str, Any] | None:
    return request.session.get(SESSION_USER_KEY)


def login_session_user(request: HttpRequest, payload: dict[str, Any]) -> dict[str, Any]:
    user = {
        "name": payload.get("name"),
        "email": payload.get("email"),
        "picture": payload.get("picture"),
    }
    request.session.cycle_key()
    request.session[SESSION_USER_KEY] = user
    return user


def admin_required(view_func):
    """JSON endpoints: answer 401 unless an admin is logged in."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not get_session_user(request):
            return JsonResponse({"error": "Authentication required"}, status=401)
        return view_func(request, *args, **kwargs)

    return _wrapped


def admin_page_required(view_func):
    """HTML pages: redirect to the login page unless an admin is logged in."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not get_session_user(request):
            return redirect("login")
        return view_func(request, *args, **kwargs)

    return _wrapped
