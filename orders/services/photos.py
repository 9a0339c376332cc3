"""
orders.services.photos

Validate uploaded images and store them as base64 rows on an order.

Photos are saved after the order has committed; a bad or failing file is
logged and reported, never allowed to fail the order itself.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from django.db import DatabaseError, transaction

from orders.models import Order, OrderPhoto

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
ALLOWED_MIME_TYPES = (
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
)


class PhotoRejected(ValueError):
    pass


@dataclass
class PhotoSaveResult:
    photos: List[OrderPhoto] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def validate_photo(upload) -> None:
    if upload.size > MAX_FILE_SIZE:
        raise PhotoRejected("File size too large (max 10MB)")
    if (upload.content_type or "").lower() not in ALLOWED_MIME_TYPES:
        raise PhotoRejected("Invalid file type. Only images are allowed.")


def save_order_photo(order: Order, upload) -> OrderPhoto:
    validate_photo(upload)
    raw = upload.read()
    with transaction.atomic():
        return OrderPhoto.objects.create(
            order=order,
            original_name=(upload.name or "photo")[:255],
            mime_type=upload.content_type.lower(),
            file_size=len(raw),
            image_data=base64.b64encode(raw).decode("ascii"),
        )


def save_order_photos(order: Order, uploads: Iterable) -> PhotoSaveResult:
    """Store every acceptable upload; empty files are skipped silently."""
    result = PhotoSaveResult()
    for upload in uploads:
        if not upload or not upload.size:
            continue
        try:
            result.photos.append(save_order_photo(order, upload))
        except PhotoRejected as exc:
            logger.warning("Photo rejected order=%s name=%s: %s", order.order_number, upload.name, exc)
            result.errors.append(f"{upload.name}: {exc}")
        except DatabaseError:
            logger.exception("Failed storing photo order=%s name=%s", order.order_number, upload.name)
            result.errors.append(f"{upload.name}: could not be stored")
    return result
