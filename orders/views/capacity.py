from django.http import Http404, JsonResponse
from django.views.decorators.http import require_GET

from orders.models import OrderKind
from orders.services.admission import capacity_info


@require_GET
def capacity_view(request, kind: str) -> JsonResponse:
    """GET /api/capacity/<kind>; max/remaining are null for unlimited kinds."""
    if kind not in OrderKind.values:
        raise Http404("Unknown order kind")
    info = capacity_info(kind)
    return JsonResponse(
        {
            "kind": info.kind,
            "current": info.current,
            "max": info.max,
            "remaining": info.remaining,
            "is_available": info.is_available,
        }
    )
