"""
orders.models.blocked_date

Calendar days on which the bakery takes no deliveries.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models


class BlockedDate(models.Model):
    date = models.DateField(unique=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="blocked_dates",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "blocked_dates"
        ordering = ("-date",)

    def __str__(self) -> str:
        return self.date.isoformat()
