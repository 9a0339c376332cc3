"""
orders.models.email_log

Purpose:
- Track order emails (admin notification + customer confirmation).
- Give admins proof of what was sent, when, to whom, and whether it failed.
  Email failures never fail an order, so this table is where they surface.

Design rules:
- Never store the email body; subject + recipient + status only.
- Link to the Order when the email belongs to one.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class EmailLog(models.Model):
    """
    Record of an attempted outgoing email.

    Not a replacement for the provider's activity log; this is the
    bakery-facing audit trail.
    """

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="email_logs",
    )

    to_email = models.CharField(max_length=1000)
    subject = models.CharField(max_length=255)

    TYPE_ADMIN_NOTIFICATION = "admin_notification"
    TYPE_CUSTOMER_CONFIRMATION = "customer_confirmation"
    TYPE_TEST = "test"
    TYPE_CHOICES = [
        (TYPE_ADMIN_NOTIFICATION, "Admin notification"),
        (TYPE_CUSTOMER_CONFIRMATION, "Customer confirmation"),
        (TYPE_TEST, "Test"),
    ]
    email_type = models.CharField(max_length=30, choices=TYPE_CHOICES, db_index=True)

    STATUS_SENT = "sent"
    STATUS_FAILED = "failed"
    STATUS_QUEUED = "queued"
    STATUS_CHOICES = [
        (STATUS_SENT, "Sent"),
        (STATUS_FAILED, "Failed"),
        (STATUS_QUEUED, "Queued"),
    ]
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_QUEUED,
        db_index=True,
    )

    error_message = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "email_log"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email_type} → {self.to_email} ({self.status})"

    def mark_sent(self) -> None:
        self.status = self.STATUS_SENT
        self.sent_at = timezone.now()
        self.save(update_fields=["status", "sent_at"])

    def mark_failed(self, error: str) -> None:
        self.status = self.STATUS_FAILED
        self.error_message = (error or "")[:5000]
        self.save(update_fields=["status", "error_message"])
