"""
orders.catalog

Product data the order forms price against: Christmas sweets (sold per 100 g),
tasting boxes, and the deposit rules for seasonal orders. Prices are CZK.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Tuple


@dataclass(frozen=True)
class Sweet:
    id: str
    name: str
    price_per_100g: int
    approx_pieces_per_100g: int


CHRISTMAS_SWEETS: Tuple[Sweet, ...] = (
    Sweet("coko-skoricove-mini-tartaletky", "Čoko-skořicové mini tartaletky", 190, 8),
    Sweet("vanilkove-rohlicky", "Vanilkové rohlíčky", 100, 15),
    Sweet("orechovo-karamelove-trubicky", "Ořechovo-karamelové trubičky", 160, 14),
    Sweet("medovnikove-koule", "Medovníkové koule", 150, 9),
    Sweet("coko-pomerancove-crinkles", "Čoko-pomerančové crinkles", 160, 5),
    Sweet("vosi-hnizda", "Vosí hnízda", 140, 9),
    Sweet("iselske-dorticky", "Išelské dortíčky", 160, 8),
    Sweet("rumove-kulicky", "Rumové kuličky", 130, 10),
    Sweet("pernicky", "Perníčky", 120, 8),
    Sweet("linecke-cukrovi", "Linecké cukroví", 110, 12),
    Sweet("matcha-linecke", "Matcha linecké", 200, 14),
    Sweet("pistaciove-cokomalinove-lanyzky", "Pistáciové a čokomalinové lanýžky", 250, 9),
    Sweet("raffaello-kulicky", "Raffaello kuličky", 150, 9),
    Sweet("plnene-orechy", "Plněné ořechy", 160, 7),
)

SWEETS_BY_ID: Dict[str, Sweet] = {sweet.id: sweet for sweet in CHRISTMAS_SWEETS}

# Christmas sweets
CHRISTMAS_MINIMUM_ORDER = 500
CHRISTMAS_DEPOSIT = 450
# Per sweet, in 100 g units. The largest possible total must fit Order.total_amount.
CHRISTMAS_MAX_QUANTITY = 1000
# Pickup is arranged individually; the row still needs a delivery date.
CHRISTMAS_SWEETS_PLACEHOLDER_DATE = date(2099, 12, 31)

# Christmas tasting boxes
CHRISTMAS_TASTING_CAKE_BOX_PRICE = 450
CHRISTMAS_TASTING_SWEETBAR_BOX_PRICE = 350
CHRISTMAS_TASTING_MIN_LEAD_DAYS = 3
CHRISTMAS_TASTING_MAX_BOXES = 100

# Wedding tasting boxes
WEDDING_TASTING_CAKE_BOX_PRICE = 550
WEDDING_TASTING_SWEETBAR_BOX_PRICE = 750
WEDDING_TASTING_DEPOSIT = 450
WEDDING_TASTING_DELIVERY_OFFSET_DAYS = 7

# Regular cakes / desserts
REGULAR_MIN_LEAD_DAYS = 7

PAYMENT_QR_PATH = "/payments/payment-qr.jpg"


@dataclass(frozen=True)
class PaymentDetails:
    requires_deposit: bool
    amount_due: Decimal
    balance_due: Decimal

    @property
    def has_balance(self) -> bool:
        return self.balance_due > 0

    @property
    def description(self) -> str:
        if self.requires_deposit:
            return f"deposit of {self.amount_due} CZK"
        return f"amount of {self.amount_due} CZK"

    @property
    def confirmation_message(self) -> str:
        if self.requires_deposit:
            return "We will send the final confirmation once the deposit arrives."
        return "We will send the final confirmation once the payment arrives."


def calculate_payment_details(total_amount, deposit_amount) -> PaymentDetails:
    """Deposit is due when the order reaches the deposit value; otherwise the full total."""
    total = Decimal(total_amount)
    deposit = Decimal(deposit_amount)
    requires_deposit = total >= deposit
    return PaymentDetails(
        requires_deposit=requires_deposit,
        amount_due=deposit if requires_deposit else total,
        balance_due=total - deposit if requires_deposit else Decimal(0),
    )
