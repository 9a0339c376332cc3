import logging

from rest_framework import generics, status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.forms import BlockedDateForm, RemoveBlockedDateForm
from orders.serializers import BlockedDateSerializer
from orders.services.blocked_dates import DateAlreadyBlocked, add_blocked_date, get_blocked_dates, remove_blocked_date

logger = logging.getLogger(__name__)


def _form_error(form) -> Response:
    errors = {field: [str(m) for m in messages] for field, messages in form.errors.items()}
    first = next(iter(errors.values()))[0]
    return Response({"success": False, "error": first, "errors": errors}, status=status.HTTP_400_BAD_REQUEST)


class BlockedDateListView(generics.ListAPIView):
    """GET /api/admin/blocked-dates"""

    permission_classes = [IsAdminUser]
    serializer_class = BlockedDateSerializer
    pagination_class = None

    def get_queryset(self):
        return get_blocked_dates()


class BlockedDateAddView(APIView):
    """POST /api/blocked-dates/add {"date": "YYYY-MM-DD"}"""

    permission_classes = [IsAdminUser]

    def post(self, request, *args, **kwargs):
        form = BlockedDateForm(request.data)
        if not form.is_valid():
            return _form_error(form)
        try:
            blocked = add_blocked_date(form.cleaned_data["date"], request.user)
        except DateAlreadyBlocked as exc:
            return Response({"success": False, "error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {"success": True, "blocked_date": BlockedDateSerializer(blocked).data},
            status=status.HTTP_201_CREATED,
        )


class BlockedDateRemoveView(APIView):
    """DELETE /api/blocked-dates/remove {"id": <int>}"""

    permission_classes = [IsAdminUser]

    def delete(self, request, *args, **kwargs):
        form = RemoveBlockedDateForm(request.data)
        if not form.is_valid():
            return _form_error(form)
        if not remove_blocked_date(form.cleaned_data["id"]):
            return Response({"success": False, "error": "Blocked date not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response({"success": True})
