"""
orders.services.admission

Admission-controlled order insert.

Every order row is created here. For kinds with a configured capacity
(settings.ORDER_KIND_CAPACITY) the insert runs in one transaction that
locks the kind's CapacityGate row and every existing order of that kind,
recounts, and only then inserts, so concurrent submissions are serialized
on the capacity check.
The count is never cached; it is always read under the lock.

========= CHANGE LOG =========
2025-11-20 • Capacity read from settings per kind; bounded retry on lock conflicts.
2025-11-08 • Replaced count-then-insert with locked transaction (no over-admission).
"""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from datetime import date
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, OperationalError, transaction

from orders.exceptions import CapacityExceeded, OrderTemporarilyUnavailable
from orders.models import CapacityGate, Order
from orders.payloads import OrderDetails

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Contact:
    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class CapacityInfo:
    kind: str
    current: int
    max: Optional[int]

    @property
    def remaining(self) -> Optional[int]:
        if self.max is None:
            return None
        return max(0, self.max - self.current)

    @property
    def is_available(self) -> bool:
        return self.max is None or self.current < self.max


def get_capacity(kind: str) -> Optional[int]:
    """Configured maximum for a kind, or None when unlimited."""
    return getattr(settings, "ORDER_KIND_CAPACITY", {}).get(kind)


def capacity_info(kind: str) -> CapacityInfo:
    return CapacityInfo(
        kind=kind,
        current=Order.objects.of_kind(kind).count(),
        max=get_capacity(kind),
    )


def generate_order_number(prefix: str) -> str:
    """`<PREFIX>-<epoch millis>-<3 random digits>`; uniqueness is enforced by the DB."""
    return f"{prefix}-{int(time.time() * 1000)}-{secrets.randbelow(1000):03d}"


def insert_order(
    contact: Contact,
    details: OrderDetails,
    delivery_date: date,
    *,
    capacity: Optional[int] = None,
) -> Order:
    """
    One admission attempt: lock, count, check, insert, commit.

    Raises CapacityExceeded when the kind is full. Lock conflicts and
    order-number collisions propagate as OperationalError / IntegrityError
    for the caller to retry.
    """
    kind = details.kind
    with transaction.atomic():
        if capacity is not None:
            CapacityGate.objects.get_or_create(kind=kind)
            CapacityGate.objects.select_for_update().get(kind=kind)
            # Lock first, then count in a separate statement: FOR UPDATE can't
            # be combined with an aggregate, and the fresh statement sees rows
            # committed by whoever held the lock before us.
            list(Order.objects.select_for_update().of_kind(kind).values_list("pk", flat=True))
            current = Order.objects.of_kind(kind).count()
            if current >= capacity:
                logger.info(
                    "Admission rejected kind=%s current=%s capacity=%s",
                    kind,
                    current,
                    capacity,
                )
                raise CapacityExceeded(kind, capacity)

        order = Order.objects.create(
            order_number=generate_order_number(details.order_number_prefix),
            customer_name=contact.name,
            customer_email=contact.email,
            customer_phone=contact.phone or None,
            delivery_date=delivery_date,
            order_kind=kind,
            **details.columns(),
        )

    logger.info("Order admitted number=%s kind=%s id=%s", order.order_number, kind, order.pk)
    return order


def admit_order(
    contact: Contact,
    details: OrderDetails,
    delivery_date: date,
    *,
    capacity: Optional[int] = None,
    attempts: Optional[int] = None,
) -> Order:
    """
    Insert an order, retrying transient conflicts a bounded number of times.

    `capacity` defaults to the configured capacity for the details' kind.
    Exhausted retries raise OrderTemporarilyUnavailable; CapacityExceeded is
    never retried.
    """
    if capacity is None:
        capacity = get_capacity(details.kind)
    if attempts is None:
        attempts = getattr(settings, "ORDER_ADMISSION_ATTEMPTS", 3)
    attempts = max(1, attempts)

    for attempt in range(1, attempts + 1):
        try:
            return insert_order(contact, details, delivery_date, capacity=capacity)
        except (OperationalError, IntegrityError) as exc:
            logger.warning(
                "Admission conflict kind=%s attempt=%s/%s: %s",
                details.kind,
                attempt,
                attempts,
                exc,
            )

    logger.error("Admission gave up kind=%s after %s attempts", details.kind, attempts)
    raise OrderTemporarilyUnavailable()
