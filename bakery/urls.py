"""
bakery URL configuration

CHANGE LOG
----------
2025-11-26
- ADD: /api/submit-christmas-tasting and /api/capacity/<kind>.
2025-11-08
- ADD: Staff routes (/api/admin/login, /logout, /users) mounted before the orders
       include so they resolve first.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path

from orders.views.photo import photo_view


def health_view(request):
    """Liveness probe."""
    return JsonResponse({"ok": True})


urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("health", health_view, name="health"),
    path("photo/<int:photo_id>", photo_view, name="photo"),
    path("api/admin/", include("staff.urls")),
    path("api/", include("orders.urls")),
]
