"""
orders.models.photo

Customer photos attached to an order. The binary lives in the row as base64
text (no object storage); orders.views.photo decodes it on the way out.
"""

from __future__ import annotations

import base64

from django.db import models


class OrderPhoto(models.Model):
    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="photos",
    )
    original_name = models.CharField(max_length=255)
    mime_type = models.CharField(max_length=100)
    file_size = models.PositiveIntegerField(help_text="Size in bytes.")
    image_data = models.TextField(help_text="Base64 encoded image bytes.")
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "order_photos"
        ordering = ("uploaded_at", "id")

    def __str__(self) -> str:
        return f"{self.original_name} ({self.mime_type}, {self.file_size} B)"

    def decoded(self) -> bytes:
        return base64.b64decode(self.image_data)
