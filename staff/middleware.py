from django.http import JsonResponse


class StaffAccessMiddleware:
    """
    Blocks the admin API unless the session belongs to an active staff user.
    Login/logout are exempt so the frontend can start and end sessions.
    Must run after AuthenticationMiddleware.
    """
    API_PREFIXES = ("/api/admin/", "/api/orders/", "/api/blocked-dates/")
    EXEMPT_PATHS = {
        "/api/admin/login",
        "/api/admin/logout",
    }

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = (request.path or "")
        if path in self.EXEMPT_PATHS:
            return self.get_response(request)

        if path.startswith(self.API_PREFIXES):
            user = getattr(request, "user", None)
            if not (user and user.is_authenticated and user.is_active and user.is_staff):
                return JsonResponse(
                    {"success": False, "error": "Unauthorized"},
                    status=401,
                )

        return self.get_response(request)
