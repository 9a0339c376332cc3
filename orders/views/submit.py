"""
Public order endpoints.

POST /api/submit-order               (multipart; photos optional)
POST /api/submit-wedding-tasting
POST /api/submit-christmas-order
POST /api/submit-christmas-tasting

Success -> 200 {"success": true, ...}. Known failures map through
OrderSubmissionError.status_code; anything else is logged and returned as a
generic 500.
"""

import logging

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.exceptions import OrderSubmissionError
from orders.services import submission

logger = logging.getLogger(__name__)


class SubmitOrderBaseView(APIView):
    # Anonymous form posts: no session auth, so no CSRF enforcement.
    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [JSONParser, FormParser, MultiPartParser]

    def submit(self, request):
        raise NotImplementedError

    def post(self, request, *args, **kwargs):
        try:
            result = self.submit(request)
        except OrderSubmissionError as exc:
            return Response(exc.as_payload(), status=exc.status_code)
        except Exception:
            logger.exception("Unexpected error in %s", type(self).__name__)
            return Response(
                {"success": False, "error": OrderSubmissionError.default_message, "code": "error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(result, status=status.HTTP_200_OK)


class SubmitOrderView(SubmitOrderBaseView):
    def submit(self, request):
        return submission.submit_regular_order(request.data, request.FILES)


class SubmitWeddingTastingView(SubmitOrderBaseView):
    def submit(self, request):
        return submission.submit_wedding_tasting(request.data)


class SubmitChristmasOrderView(SubmitOrderBaseView):
    def submit(self, request):
        return submission.submit_christmas_sweets(request.data)


class SubmitChristmasTastingView(SubmitOrderBaseView):
    def submit(self, request):
        return submission.submit_christmas_tasting(request.data)
