"""
orders.payloads

Typed order-kind variants.

The orders table is one wide row; each kind owns a slice of its columns.
A variant flattens to the *whole* kind column set (its own values, every other
kind column nulled) so a row can never carry two payload shapes, and
`details_from_order()` rebuilds the variant from a stored row.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from orders import catalog
from orders.models.order import Order, OrderKind

KIND_COLUMNS: Tuple[str, ...] = (
    "order_cake",
    "order_dessert",
    "cake_size",
    "cake_flavor",
    "cake_message",
    "dessert_choice",
    "tasting_cake_box_qty",
    "tasting_sweetbar_box_qty",
    "tasting_notes",
    "sweets_items",
    "total_amount",
)

_BOOLEAN_COLUMNS = ("order_cake", "order_dessert")


def _blank_columns() -> Dict[str, Any]:
    return {col: (False if col in _BOOLEAN_COLUMNS else None) for col in KIND_COLUMNS}


def _text_or_none(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


@dataclass(frozen=True)
class RegularDetails:
    kind: ClassVar[str] = OrderKind.REGULAR.value
    order_number_prefix: ClassVar[str] = "ORD"

    order_cake: bool
    order_dessert: bool
    cake_size: Optional[str] = None
    cake_flavor: Optional[str] = None
    cake_message: Optional[str] = None
    dessert_choice: Optional[str] = None

    def columns(self) -> Dict[str, Any]:
        cols = _blank_columns()
        cols["order_cake"] = self.order_cake
        cols["order_dessert"] = self.order_dessert
        if self.order_cake:
            cols["cake_size"] = _text_or_none(self.cake_size)
            cols["cake_flavor"] = _text_or_none(self.cake_flavor)
            cols["cake_message"] = _text_or_none(self.cake_message)
        if self.order_dessert:
            cols["dessert_choice"] = _text_or_none(self.dessert_choice)
        return cols


@dataclass(frozen=True)
class WeddingTastingDetails:
    kind: ClassVar[str] = OrderKind.WEDDING_TASTING.value
    order_number_prefix: ClassVar[str] = "WEDDING"

    cake_box: bool
    sweetbar_box: bool

    @property
    def total(self) -> Decimal:
        total = 0
        if self.cake_box:
            total += catalog.WEDDING_TASTING_CAKE_BOX_PRICE
        if self.sweetbar_box:
            total += catalog.WEDDING_TASTING_SWEETBAR_BOX_PRICE
        return Decimal(total)

    def columns(self) -> Dict[str, Any]:
        cols = _blank_columns()
        cols["tasting_cake_box_qty"] = 1 if self.cake_box else None
        cols["tasting_sweetbar_box_qty"] = 1 if self.sweetbar_box else None
        return cols


@dataclass(frozen=True)
class SweetLine:
    sweet_id: str
    name: str
    quantity: int  # 100 g units
    price_per_100g: int

    @property
    def total_price(self) -> int:
        return self.quantity * self.price_per_100g

    @property
    def weight_grams(self) -> int:
        return self.quantity * 100

    def as_dict(self) -> Dict[str, Any]:
        return {
            "sweet_id": self.sweet_id,
            "name": self.name,
            "quantity": self.quantity,
            "price_per_100g": self.price_per_100g,
            "total_price": self.total_price,
        }


@dataclass(frozen=True)
class ChristmasSweetsDetails:
    kind: ClassVar[str] = OrderKind.CHRISTMAS_SWEETS.value
    order_number_prefix: ClassVar[str] = "XMAS"

    items: Tuple[SweetLine, ...]

    @property
    def total(self) -> Decimal:
        return Decimal(sum(line.total_price for line in self.items))

    @property
    def total_weight_grams(self) -> int:
        return sum(line.weight_grams for line in self.items)

    @classmethod
    def from_quantities(cls, quantities: Dict[str, int]) -> "ChristmasSweetsDetails":
        """Build line items in catalog order, dropping zero quantities."""
        lines = []
        for sweet in catalog.CHRISTMAS_SWEETS:
            qty = int(quantities.get(sweet.id) or 0)
            if qty > 0:
                lines.append(SweetLine(sweet.id, sweet.name, qty, sweet.price_per_100g))
        return cls(items=tuple(lines))

    def columns(self) -> Dict[str, Any]:
        cols = _blank_columns()
        cols["sweets_items"] = [line.as_dict() for line in self.items]
        cols["total_amount"] = self.total
        return cols


@dataclass(frozen=True)
class ChristmasTastingDetails:
    kind: ClassVar[str] = OrderKind.CHRISTMAS_TASTING.value
    order_number_prefix: ClassVar[str] = "XTASTE"

    cake_box_qty: int
    sweetbar_box_qty: int
    notes: Optional[str] = None

    @property
    def total(self) -> Decimal:
        return Decimal(
            self.cake_box_qty * catalog.CHRISTMAS_TASTING_CAKE_BOX_PRICE
            + self.sweetbar_box_qty * catalog.CHRISTMAS_TASTING_SWEETBAR_BOX_PRICE
        )

    def columns(self) -> Dict[str, Any]:
        cols = _blank_columns()
        cols["tasting_cake_box_qty"] = self.cake_box_qty
        cols["tasting_sweetbar_box_qty"] = self.sweetbar_box_qty
        cols["tasting_notes"] = _text_or_none(self.notes)
        cols["total_amount"] = self.total
        return cols


OrderDetails = Union[RegularDetails, WeddingTastingDetails, ChristmasSweetsDetails, ChristmasTastingDetails]


def details_from_order(order: Order) -> OrderDetails:
    kind = order.order_kind
    if kind == OrderKind.REGULAR:
        return RegularDetails(
            order_cake=order.order_cake,
            order_dessert=order.order_dessert,
            cake_size=order.cake_size,
            cake_flavor=order.cake_flavor,
            cake_message=order.cake_message,
            dessert_choice=order.dessert_choice,
        )
    if kind == OrderKind.WEDDING_TASTING:
        return WeddingTastingDetails(
            cake_box=bool(order.tasting_cake_box_qty),
            sweetbar_box=bool(order.tasting_sweetbar_box_qty),
        )
    if kind == OrderKind.CHRISTMAS_SWEETS:
        return ChristmasSweetsDetails(
            items=tuple(
                SweetLine(
                    sweet_id=item["sweet_id"],
                    name=item["name"],
                    quantity=int(item["quantity"]),
                    price_per_100g=int(item["price_per_100g"]),
                )
                for item in (order.sweets_items or [])
            )
        )
    if kind == OrderKind.CHRISTMAS_TASTING:
        return ChristmasTastingDetails(
            cake_box_qty=order.tasting_cake_box_qty or 0,
            sweetbar_box_qty=order.tasting_sweetbar_box_qty or 0,
            notes=order.tasting_notes,
        )
    raise ValueError(f"Unknown order kind: {kind!r}")
