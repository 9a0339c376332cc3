"""
orders.services.submission

One entry point per public order form.

Flow (same for every kind):
  validate (Django form) -> admit_order (locked insert) -> photos -> emails

Only validation and admission can fail the request. Everything after the
commit is best-effort and reported in the result instead of raised.

========= CHANGE LOG =========
2025-11-26 • ADD: Christmas tasting boxes (date >= today+3, optional capacity).
2025-11-20 • Christmas sweets + wedding tasting return payment instructions.
2025-11-08 • All kinds go through admission.admit_order.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, Optional

from django.utils import timezone

from orders import catalog
from orders.exceptions import OrderValidationError
from orders.forms import (
    ChristmasSweetsForm,
    ChristmasTastingForm,
    RegularOrderForm,
    WeddingTastingForm,
)
from orders.models import Order, OrderPhoto
from orders.payloads import ChristmasSweetsDetails
from orders.services.admission import admit_order
from orders.services.notifications import NotificationResult, notify_order_submitted, payment_for
from orders.services.photos import save_order_photos

logger = logging.getLogger(__name__)


def _validated(form):
    if not form.is_valid():
        errors = form.error_dict()
        logger.info("Submission rejected form=%s fields=%s", type(form).__name__, sorted(errors))
        raise OrderValidationError(errors)
    return form


def _uploads(files) -> Iterable:
    if files is None:
        return []
    getlist = getattr(files, "getlist", None)
    if getlist is not None:
        return getlist("photos")
    photos = files.get("photos") or []
    return photos if isinstance(photos, (list, tuple)) else [photos]


def _notify(order: Order, photos: Iterable[OrderPhoto] = ()) -> Optional[NotificationResult]:
    try:
        return notify_order_submitted(order, list(photos))
    except Exception:
        # Order is committed; anything email-related stops here.
        logger.exception("Notification step failed for order %s", order.order_number)
        return None


def _payment_payload(order: Order) -> Optional[Dict[str, Any]]:
    payment = payment_for(order)
    if payment is None:
        return None
    return {
        "requires_deposit": payment.requires_deposit,
        "amount_due": str(payment.amount_due),
        "balance_due": str(payment.balance_due),
        "description": payment.description,
        "qr_code": catalog.PAYMENT_QR_PATH,
    }


def _result(order: Order, message: str, order_details: Dict[str, Any], notified, **extra) -> Dict[str, Any]:
    result = {
        "success": True,
        "message": message,
        "order_id": order.pk,
        "order_number": order.order_number,
        "order_details": order_details,
        "emails_sent": bool(notified and notified.admin_sent and notified.customer_sent),
    }
    result.update(extra)
    return result


def submit_regular_order(data, files=None) -> Dict[str, Any]:
    form = _validated(RegularOrderForm(data))
    details = form.details()
    order = admit_order(form.contact(), details, form.cleaned_data["date"])

    saved = save_order_photos(order, _uploads(files))
    notified = _notify(order, saved.photos)

    return _result(
        order,
        "Order received! We will contact you soon.",
        {
            "order_cake": details.order_cake,
            "order_dessert": details.order_dessert,
            "delivery_date": order.delivery_date.isoformat(),
            "photo_count": len(saved.photos),
        },
        notified,
        photo_count=len(saved.photos),
        photo_errors=saved.errors,
    )


def submit_wedding_tasting(data) -> Dict[str, Any]:
    form = _validated(WeddingTastingForm(data))
    details = form.details()
    delivery_date = timezone.localdate() + timedelta(days=catalog.WEDDING_TASTING_DELIVERY_OFFSET_DAYS)
    order = admit_order(form.contact(), details, delivery_date)

    notified = _notify(order)
    return _result(
        order,
        "Wedding tasting order received!",
        {
            "cake_box": details.cake_box,
            "sweetbar_box": details.sweetbar_box,
            "total": str(details.total),
        },
        notified,
        payment=_payment_payload(order),
    )


def submit_christmas_sweets(data) -> Dict[str, Any]:
    form = _validated(ChristmasSweetsForm(data))
    details: ChristmasSweetsDetails = form.details()
    order = admit_order(form.contact(), details, catalog.CHRISTMAS_SWEETS_PLACEHOLDER_DATE)

    notified = _notify(order)
    return _result(
        order,
        "Christmas sweets order received!",
        {
            "items": [line.as_dict() for line in details.items],
            "total_weight_grams": details.total_weight_grams,
            "total": str(details.total),
        },
        notified,
        payment=_payment_payload(order),
    )


def submit_christmas_tasting(data) -> Dict[str, Any]:
    form = _validated(ChristmasTastingForm(data))
    details = form.details()
    order = admit_order(form.contact(), details, form.cleaned_data["date"])

    notified = _notify(order)
    return _result(
        order,
        "Christmas tasting order received!",
        {
            "cake_box_qty": details.cake_box_qty,
            "sweetbar_box_qty": details.sweetbar_box_qty,
            "delivery_date": order.delivery_date.isoformat(),
            "total": str(details.total),
        },
        notified,
        payment=_payment_payload(order),
    )
