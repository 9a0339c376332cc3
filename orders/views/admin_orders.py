from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.serializers import OrderSerializer
from orders.services.queries import get_order_by_number, list_orders, order_stats


class AdminOrderListView(APIView):
    """
    GET /api/admin/orders?status=&sort=&dir=&search=&page=&page_size=
    """

    permission_classes = [IsAdminUser]

    def get(self, request, *args, **kwargs):
        params = request.query_params
        page = list_orders(
            status=params.get("status"),
            sort=params.get("sort"),
            direction=params.get("dir"),
            search=params.get("search"),
            page=params.get("page"),
            page_size=params.get("page_size"),
        )
        return Response(
            {
                "orders": OrderSerializer(page.orders, many=True).data,
                "total": page.total,
                "page": page.page,
                "page_size": page.page_size,
                "total_pages": page.total_pages,
            }
        )


class AdminOrderDetailView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request, order_number: str, *args, **kwargs):
        order = get_order_by_number(order_number)
        if order is None:
            return Response({"success": False, "error": "Order not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response({"order": OrderSerializer(order).data})


class AdminOrderStatsView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request, *args, **kwargs):
        return Response(order_stats())
