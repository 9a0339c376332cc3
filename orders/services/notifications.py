"""
orders.services.notifications

Order emails: one notification to the bakery, one confirmation to the customer.

LOCKED INTENT
- Sending is best-effort. The order is already committed when we get here;
  a provider outage is logged + recorded in EmailLog and never surfaces as a
  failed submission.
- Every attempt gets an EmailLog row (queued -> sent / failed).
- Bodies are rendered from templates (text + HTML); customer input is escaped
  by the template engine in the HTML part.

========= CHANGE LOG =========
2025-11-20 • Payment instructions for deposit-based kinds; photo attachments for cake orders.
2025-11-08 • EmailLog per attempt; failures no longer raise to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Tuple

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone

from orders import catalog
from orders.models import EmailLog, Order, OrderKind, OrderPhoto

logger = logging.getLogger(__name__)

Attachment = Tuple[str, bytes, str]

SUBJECT_PREFIXES = {
    OrderKind.REGULAR: "New order",
    OrderKind.WEDDING_TASTING: "New wedding tasting order",
    OrderKind.CHRISTMAS_SWEETS: "New Christmas sweets order",
    OrderKind.CHRISTMAS_TASTING: "New Christmas tasting order",
}


@dataclass(frozen=True)
class NotificationResult:
    admin_sent: bool
    customer_sent: bool


def _from_email() -> str:
    return (
        getattr(settings, "DEFAULT_FROM_EMAIL", "")
        or getattr(settings, "SERVER_EMAIL", "")
        or "no-reply@localhost"
    )


def _recipients() -> List[str]:
    return list(getattr(settings, "ORDER_NOTIFICATION_RECIPIENTS", []) or [])


def payment_for(order: Order) -> Optional[catalog.PaymentDetails]:
    """Seasonal kinds are prepaid (deposit or full amount); regular orders are priced individually."""
    if order.order_kind == OrderKind.CHRISTMAS_SWEETS:
        return catalog.calculate_payment_details(order.total_amount or 0, catalog.CHRISTMAS_DEPOSIT)
    if order.order_kind == OrderKind.WEDDING_TASTING:
        return catalog.calculate_payment_details(order.details.total, catalog.WEDDING_TASTING_DEPOSIT)
    if order.order_kind == OrderKind.CHRISTMAS_TASTING:
        total = Decimal(order.total_amount or 0)
        return catalog.PaymentDetails(requires_deposit=False, amount_due=total, balance_due=Decimal(0))
    return None


def _context(order: Order, photo_count: int = 0) -> dict:
    return {
        "order": order,
        "details": order.details,
        "payment": payment_for(order),
        "photo_count": photo_count,
        "prices": {
            "wedding_cake_box": catalog.WEDDING_TASTING_CAKE_BOX_PRICE,
            "wedding_sweetbar_box": catalog.WEDDING_TASTING_SWEETBAR_BOX_PRICE,
        },
        "bakery_name": settings.BAKERY_NAME,
        "contact_email": settings.BAKERY_CONTACT_EMAIL,
        "site_url": settings.BAKERY_SITE_URL,
        "payment_qr_path": catalog.PAYMENT_QR_PATH,
    }


def send_logged_email(
    *,
    email_type: str,
    to: Sequence[str],
    subject: str,
    template: str,
    context: dict,
    order: Optional[Order] = None,
    reply_to: Optional[Sequence[str]] = None,
    attachments: Iterable[Attachment] = (),
) -> bool:
    """
    Render `<template>.txt` (+ `<template>.html` for order emails), send, and
    record the outcome. Returns True when the backend accepted the message.
    """
    log = EmailLog.objects.create(
        order=order,
        to_email=", ".join(to),
        subject=subject[:255],
        email_type=email_type,
    )
    try:
        text_body = render_to_string(f"{template}.txt", context)
        msg = EmailMultiAlternatives(
            subject=subject,
            body=text_body,
            from_email=_from_email(),
            to=list(to),
            reply_to=list(reply_to or []),
        )
        if email_type != EmailLog.TYPE_TEST:
            msg.attach_alternative(render_to_string(f"{template}.html", context), "text/html")
        for filename, content, mimetype in attachments:
            msg.attach(filename, content, mimetype)
        msg.send(fail_silently=False)
    except Exception as exc:
        logger.exception(
            "Email send failed type=%s to=%s order=%s",
            email_type,
            log.to_email,
            order and order.order_number,
        )
        log.mark_failed(str(exc))
        return False

    log.mark_sent()
    logger.info("Email sent type=%s to=%s order=%s", email_type, log.to_email, order and order.order_number)
    return True


def photo_attachments(photos: Iterable[OrderPhoto]) -> List[Attachment]:
    return [(photo.original_name, photo.decoded(), photo.mime_type) for photo in photos]


def send_admin_notification(order: Order, photos: Sequence[OrderPhoto] = ()) -> bool:
    recipients = _recipients()
    if not recipients:
        logger.warning("No ORDER_NOTIFICATION_RECIPIENTS configured; skipping admin email for %s", order.order_number)
        return False
    prefix = SUBJECT_PREFIXES.get(order.order_kind, "New order")
    return send_logged_email(
        email_type=EmailLog.TYPE_ADMIN_NOTIFICATION,
        to=recipients,
        subject=f"{prefix} #{order.order_number} - {' '.join(order.customer_name.split())}",
        template="orders/email/admin_notification",
        context=_context(order, photo_count=len(photos)),
        order=order,
        reply_to=[order.customer_email],
        attachments=photo_attachments(photos),
    )


def send_customer_confirmation(order: Order, photo_count: int = 0) -> bool:
    return send_logged_email(
        email_type=EmailLog.TYPE_CUSTOMER_CONFIRMATION,
        to=[order.customer_email],
        subject=f"Order confirmation #{order.order_number} - {settings.BAKERY_NAME}",
        template="orders/email/customer_confirmation",
        context=_context(order, photo_count=photo_count),
        order=order,
        reply_to=[settings.BAKERY_CONTACT_EMAIL],
    )


def notify_order_submitted(order: Order, photos: Sequence[OrderPhoto] = ()) -> NotificationResult:
    photos = list(photos)
    return NotificationResult(
        admin_sent=send_admin_notification(order, photos),
        customer_sent=send_customer_confirmation(order, photo_count=len(photos)),
    )


def send_test_email(to_email: str) -> bool:
    backend = getattr(settings, "EMAIL_BACKEND", "")
    return send_logged_email(
        email_type=EmailLog.TYPE_TEST,
        to=[to_email],
        subject=f"{settings.BAKERY_NAME} - test email",
        template="orders/email/test_email",
        context={
            "bakery_name": settings.BAKERY_NAME,
            "sent_at": timezone.localtime(),
            "backend": backend,
        },
    )
