# -*- coding: utf-8 -*-
"""
Orders: models package entrypoint.

This app uses a models/ package (not a single models.py); Django discovers
models when modules are imported, so every model module is imported here.
"""

from .order import Order, OrderKind, OrderStatus
from .photo import OrderPhoto
from .blocked_date import BlockedDate
from .email_log import EmailLog
from .capacity_gate import CapacityGate

__all__ = [
    "Order",
    "OrderKind",
    "OrderStatus",
    "OrderPhoto",
    "BlockedDate",
    "EmailLog",
    "CapacityGate",
]
