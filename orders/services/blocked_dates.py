"""
orders.services.blocked_dates

Admin-managed delivery blackout days.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List

from django.db import IntegrityError, transaction

from orders.models import BlockedDate

logger = logging.getLogger(__name__)


class DateAlreadyBlocked(ValueError):
    pass


def get_blocked_dates() -> List[BlockedDate]:
    return list(BlockedDate.objects.select_related("created_by").order_by("-date"))


def add_blocked_date(day: date, user) -> BlockedDate:
    try:
        with transaction.atomic():
            blocked = BlockedDate.objects.create(date=day, created_by=user)
    except IntegrityError as exc:
        raise DateAlreadyBlocked(f"{day.isoformat()} is already blocked") from exc
    logger.info("Blocked date added %s by user=%s", day.isoformat(), user.pk)
    return blocked


def remove_blocked_date(blocked_id: int) -> bool:
    """Returns False when no such row exists."""
    deleted, _ = BlockedDate.objects.filter(pk=blocked_id).delete()
    if deleted:
        logger.info("Blocked date removed id=%s", blocked_id)
    return bool(deleted)


def is_date_blocked(day: date) -> bool:
    return BlockedDate.objects.filter(date=day).exists()
