from datetime import timedelta
from itertools import count

from django.contrib.auth import get_user_model
from django.utils import timezone

from orders.models import Order
from orders.payloads import RegularDetails
from orders.services.admission import Contact

_numbers = count(1)


def future(days: int):
    return timezone.localdate() + timedelta(days=days)


def make_staff(email="admin@example.com", password="s3cret-pass", **extra):
    extra.setdefault("is_staff", True)
    return get_user_model().objects.create_user(username=email, email=email, password=password, **extra)


def contact(name="Jana Nováková", email="jana@example.com", phone="+420 777 123 456"):
    return Contact(name=name, email=email, phone=phone)


def make_order(details=None, **fields):
    """Insert an order row directly, bypassing admission."""
    details = details or RegularDetails(order_cake=True, order_dessert=False, cake_size="M", cake_flavor="Vanilka")
    values = {
        "order_number": f"TEST-{next(_numbers):05d}",
        "customer_name": "Jana Nováková",
        "customer_email": "jana@example.com",
        "customer_phone": "777123456",
        "delivery_date": future(10),
        "order_kind": details.kind,
    }
    values.update(details.columns())
    values.update(fields)
    return Order.objects.create(**values)
