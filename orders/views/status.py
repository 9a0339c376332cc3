"""
Admin milestone toggles.

PATCH /api/orders/<id>/paid       {"isPaid": bool}
PATCH /api/orders/<id>/delivered  {"isDelivered": bool}
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.models import Order
from orders.serializers import OrderSerializer

logger = logging.getLogger(__name__)


class OrderMilestoneView(APIView):
    permission_classes = [IsAdminUser]
    milestone_field = ""
    flag_name = ""

    def patch(self, request, order_id: int, *args, **kwargs):
        value = request.data.get(self.flag_name) if isinstance(request.data, dict) else None
        if not isinstance(value, bool):
            return Response(
                {"success": False, "error": f"{self.flag_name} must be a boolean"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        order = Order.objects.filter(pk=order_id).first()
        if order is None:
            return Response(
                {"success": False, "error": "Order not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        changed = order.set_milestone(self.milestone_field, value, user=request.user)
        if changed:
            logger.info(
                "Order %s %s=%s by %s",
                order.order_number,
                self.milestone_field,
                value,
                request.user.email or request.user.username,
            )
        return Response({"success": True, "changed": changed, "order": OrderSerializer(order).data})


class OrderPaidView(OrderMilestoneView):
    milestone_field = "paid_at"
    flag_name = "isPaid"


class OrderDeliveredView(OrderMilestoneView):
    milestone_field = "delivered_at"
    flag_name = "isDelivered"
