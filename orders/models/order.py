"""
orders.models.order

One row per customer submission, for every order kind.

The kind-specific columns are a flattened tagged union: `order_kind` picks
which of them are meaningful and orders.payloads rebuilds the typed variant.
Rows are created by orders.services.admission only; admins later set or clear
the paid/delivered milestones.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Case, CharField, Q, Value, When
from django.utils import timezone

from .base import TimeStampedModel


class OrderKind(models.TextChoices):
    REGULAR = "regular", "Dort / dezerty"
    WEDDING_TASTING = "wedding_tasting", "Svatební ochutnávka"
    CHRISTMAS_SWEETS = "christmas_sweets", "Vánoční cukroví"
    CHRISTMAS_TASTING = "christmas_tasting", "Vánoční ochutnávka"


class OrderStatus(models.TextChoices):
    CREATED = "created", "Vytvořeno"
    PAID = "paid", "Zaplaceno"
    DELIVERED = "delivered", "Doručeno"


class OrderQuerySet(models.QuerySet):
    def with_status(self):
        """Annotate the derived status so it can be filtered and sorted on."""
        return self.annotate(
            status_value=Case(
                When(delivered_at__isnull=False, then=Value(OrderStatus.DELIVERED.value)),
                When(paid_at__isnull=False, then=Value(OrderStatus.PAID.value)),
                default=Value(OrderStatus.CREATED.value),
                output_field=CharField(),
            )
        )

    def in_status(self, status: str):
        if status == OrderStatus.DELIVERED:
            return self.filter(delivered_at__isnull=False)
        if status == OrderStatus.PAID:
            return self.filter(paid_at__isnull=False, delivered_at__isnull=True)
        if status == OrderStatus.CREATED:
            return self.filter(paid_at__isnull=True, delivered_at__isnull=True)
        return self

    def search(self, term: str):
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(
            Q(order_number__icontains=term)
            | Q(customer_name__icontains=term)
            | Q(customer_email__icontains=term)
        )

    def of_kind(self, kind: str):
        return self.filter(order_kind=kind)


class Order(TimeStampedModel):
    order_number = models.CharField(max_length=100, unique=True)

    # ---- customer ----
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(max_length=255, db_index=True)
    customer_phone = models.CharField(max_length=50, blank=True, null=True)
    delivery_date = models.DateField(db_index=True)

    order_kind = models.CharField(
        max_length=50,
        choices=OrderKind.choices,
        default=OrderKind.REGULAR,
        db_index=True,
    )

    # ---- regular: cake / desserts ----
    order_cake = models.BooleanField(default=False)
    order_dessert = models.BooleanField(default=False)
    cake_size = models.CharField(max_length=100, blank=True, null=True)
    cake_flavor = models.CharField(max_length=100, blank=True, null=True)
    cake_message = models.TextField(blank=True, null=True)
    dessert_choice = models.CharField(max_length=255, blank=True, null=True)

    # ---- tastings (wedding + christmas) ----
    tasting_cake_box_qty = models.PositiveIntegerField(blank=True, null=True)
    tasting_sweetbar_box_qty = models.PositiveIntegerField(blank=True, null=True)
    tasting_notes = models.TextField(blank=True, null=True)

    # ---- christmas sweets ----
    sweets_items = models.JSONField(
        blank=True,
        null=True,
        help_text="Line items: sweet id, name, quantity (x100g), unit and line price.",
    )

    total_amount = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)

    # ---- milestones ----
    paid_at = models.DateTimeField(blank=True, null=True)
    delivered_at = models.DateTimeField(blank=True, null=True)

    notes = models.TextField(blank=True, null=True)
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="updated_orders",
    )

    objects = OrderQuerySet.as_manager()

    class Meta:
        db_table = "orders"
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["order_kind", "created_at"], name="orders_kind_created_idx"),
            models.Index(fields=["customer_name"], name="orders_customer_name_idx"),
        ]

    def __str__(self) -> str:
        return f"Order {self.order_number} - {self.customer_name} ({self.order_kind})"

    @property
    def status(self) -> str:
        if self.delivered_at:
            return OrderStatus.DELIVERED.value
        if self.paid_at:
            return OrderStatus.PAID.value
        return OrderStatus.CREATED.value

    @property
    def details(self):
        """The typed payload variant for this row's kind."""
        from orders.payloads import details_from_order

        return details_from_order(self)

    def set_milestone(self, field: str, reached: bool, *, user=None) -> bool:
        """
        Set or clear `paid_at` / `delivered_at`.

        Setting an already-set milestone keeps the original timestamp.
        Returns True when the row changed.
        """
        if field not in ("paid_at", "delivered_at"):
            raise ValueError(f"Unknown milestone: {field}")

        current = getattr(self, field)
        if reached and current is not None:
            return False
        if not reached and current is None:
            return False

        setattr(self, field, timezone.now() if reached else None)
        self.updated_by = user if getattr(user, "is_authenticated", False) else None
        self.save(update_fields=[field, "updated_by", "updated_at"])
        return True
