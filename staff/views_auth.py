from __future__ import annotations

import json
import logging

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .models import StaffProfile

logger = logging.getLogger(__name__)


def _json_error(msg: str, *, status: int = 400) -> JsonResponse:
    return JsonResponse({"success": False, "error": msg}, status=status)


def _payload(request: HttpRequest) -> dict:
    if (request.content_type or "").startswith("application/json"):
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    return request.POST


@csrf_exempt
@require_POST
def admin_login(request: HttpRequest) -> JsonResponse:
    """Email + password login for staff, with lockout after repeated failures."""
    data = _payload(request)
    email = (data.get("email") or "").lower().strip()
    password = data.get("password") or ""
    if not email or not password:
        return _json_error("Email and password are required.")

    User = get_user_model()
    user = User.objects.filter(email__iexact=email, is_staff=True).first()
    if user is None:
        return _json_error("Invalid credentials.", status=401)

    profile = StaffProfile.for_user(user)
    if profile.is_locked():
        logger.warning("Login refused for locked account %s", email)
        return _json_error("Account is locked. Try again later.", status=403)

    authed = authenticate(request, username=user.get_username(), password=password)
    if authed is None:
        if profile.register_failure():
            logger.warning("Account %s locked after %s failed logins", email, StaffProfile.MAX_LOGIN_ATTEMPTS)
        return _json_error("Invalid credentials.", status=401)

    profile.register_success()
    login(request, authed)
    request.session.set_expiry(settings.SESSION_COOKIE_AGE)
    logger.info("Admin %s logged in", email)
    return JsonResponse(
        {
            "success": True,
            "user": {"id": authed.pk, "email": authed.email, "name": authed.get_full_name() or authed.get_username()},
        }
    )


@require_POST
def admin_logout(request: HttpRequest) -> JsonResponse:
    if request.user.is_authenticated:
        logger.info("Admin %s logged out", request.user.email)
    logout(request)
    return JsonResponse({"success": True})
