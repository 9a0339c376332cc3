from django.urls import path

from .views.admin_orders import AdminOrderDetailView, AdminOrderListView, AdminOrderStatsView
from .views.blocked_dates import BlockedDateAddView, BlockedDateListView, BlockedDateRemoveView
from .views.capacity import capacity_view
from .views.status import OrderDeliveredView, OrderPaidView
from .views.submit import (
    SubmitChristmasOrderView,
    SubmitChristmasTastingView,
    SubmitOrderView,
    SubmitWeddingTastingView,
)

urlpatterns = [
    # public
    path("submit-order", SubmitOrderView.as_view(), name="submit-order"),
    path("submit-wedding-tasting", SubmitWeddingTastingView.as_view(), name="submit-wedding-tasting"),
    path("submit-christmas-order", SubmitChristmasOrderView.as_view(), name="submit-christmas-order"),
    path("submit-christmas-tasting", SubmitChristmasTastingView.as_view(), name="submit-christmas-tasting"),
    path("capacity/<str:kind>", capacity_view, name="capacity"),

    # admin
    path("orders/<int:order_id>/paid", OrderPaidView.as_view(), name="order-paid"),
    path("orders/<int:order_id>/delivered", OrderDeliveredView.as_view(), name="order-delivered"),
    path("blocked-dates/add", BlockedDateAddView.as_view(), name="blocked-date-add"),
    path("blocked-dates/remove", BlockedDateRemoveView.as_view(), name="blocked-date-remove"),
    path("admin/blocked-dates", BlockedDateListView.as_view(), name="admin-blocked-dates"),
    path("admin/orders", AdminOrderListView.as_view(), name="admin-orders"),
    path("admin/orders/<str:order_number>", AdminOrderDetailView.as_view(), name="admin-order-detail"),
    path("admin/stats", AdminOrderStatsView.as_view(), name="admin-stats"),
]
