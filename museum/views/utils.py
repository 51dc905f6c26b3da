import json
from typing import Any

from django.http import HttpRequest


class InvalidRequestBody(ValueError):
    pass


def get_client_ip(group: str | None, request: HttpRequest) -> str:
    """Rate-limit key: the first X-Forwarded-For hop, else the peer address."""
    forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")


def parse_json_body(request: HttpRequest) -> dict[str, Any]:
    try:
        body = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        raise InvalidRequestBody("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise InvalidRequestBody("Request body must be a JSON object")
    return body


def parse_limit(request: HttpRequest, default: int, maximum: int) -> int:
    try:
        limit = int(request.GET.get("limit", default))
    except (ValueError, TypeError):
        limit = default
    return max(0, min(limit, maximum))
