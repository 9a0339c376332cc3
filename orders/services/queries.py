"""Read-side helpers for the admin API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from django.db.models import Count, Prefetch, Q

from orders.models import Order, OrderPhoto, OrderStatus

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

SORT_FIELDS = {
    "created_at": "created_at",
    "delivery_date": "delivery_date",
    "order_number": "order_number",
    "customer_name": "customer_name",
    "status": "status_value",
}

STATUS_FILTERS = {s.value for s in OrderStatus}


@dataclass
class OrderPage:
    orders: List[Order]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if not self.total:
            return 0
        return (self.total + self.page_size - 1) // self.page_size


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _with_photo_metadata(qs):
    return qs.prefetch_related(
        Prefetch(
            "photos",
            queryset=OrderPhoto.objects.defer("image_data").order_by("id"),
        )
    )


def list_orders(
    *,
    status: Optional[str] = None,
    sort: Optional[str] = None,
    direction: Optional[str] = None,
    search: Optional[str] = None,
    page=None,
    page_size=None,
) -> OrderPage:
    """
    Filtered, sorted, paginated orders.

    Unknown `status` (or "all") means no filter; unknown `sort` falls back to
    created_at; `direction` defaults to desc. Ties break on id so pages are stable.
    """
    page = _positive_int(page, 1)
    page_size = min(_positive_int(page_size, DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)

    qs = Order.objects.with_status().search(search or "")
    if status in STATUS_FILTERS:
        qs = qs.in_status(status)

    field = SORT_FIELDS.get(sort or "", "created_at")
    prefix = "" if (direction or "").lower() == "asc" else "-"
    qs = qs.order_by(f"{prefix}{field}", f"{prefix}id")

    total = qs.count()
    offset = (page - 1) * page_size
    orders = list(_with_photo_metadata(qs)[offset : offset + page_size])
    return OrderPage(orders=orders, total=total, page=page, page_size=page_size)


def get_order_by_number(order_number: str) -> Optional[Order]:
    return _with_photo_metadata(Order.objects.all()).filter(order_number=order_number).first()


def order_stats() -> Dict[str, int]:
    return Order.objects.aggregate(
        total=Count("id"),
        created=Count("id", filter=Q(paid_at__isnull=True, delivered_at__isnull=True)),
        paid=Count("id", filter=Q(paid_at__isnull=False, delivered_at__isnull=True)),
        delivered=Count("id", filter=Q(delivered_at__isnull=False)),
    )
