import binascii
import logging

from django.http import Http404, HttpResponse
from django.views.decorators.http import require_GET

from orders.models import OrderPhoto

logger = logging.getLogger(__name__)


@require_GET
def photo_view(request, photo_id: int) -> HttpResponse:
    photo = OrderPhoto.objects.filter(pk=photo_id).first()
    if photo is None:
        raise Http404("Photo not found")

    try:
        data = photo.decoded()
    except (binascii.Error, ValueError):
        logger.exception("Stored photo %s is not valid base64", photo_id)
        raise Http404("Photo not found")

    response = HttpResponse(data, content_type=photo.mime_type)
    response["Content-Length"] = str(len(data))
    response["Cache-Control"] = "public, max-age=31536000"
    safe_name = photo.original_name.replace('"', "")
    response["Content-Disposition"] = f'inline; filename="{safe_name}"'
    return response
