"""
orders.exceptions

Errors raised by the submission services. Each carries the HTTP status and a
stable `code` the views put into the JSON body, so the frontend can tell a
full tasting apart from a typo in the form.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class OrderSubmissionError(Exception):
    status_code = 400
    code = "error"
    default_message = "Something went wrong while processing the order. Please try again later."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_payload(self) -> Dict[str, object]:
        return {"success": False, "error": self.message, "code": self.code}


class OrderValidationError(OrderSubmissionError):
    status_code = 400
    code = "invalid"
    default_message = "Please correct the highlighted fields."

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        self.errors = errors
        if message is None:
            flat = [msg for msgs in errors.values() for msg in msgs]
            message = ", ".join(flat) or None
        super().__init__(message)

    def as_payload(self) -> Dict[str, object]:
        payload = super().as_payload()
        payload["errors"] = self.errors
        return payload


class CapacityExceeded(OrderSubmissionError):
    status_code = 409
    code = "capacity_exceeded"

    def __init__(self, kind: str, capacity: int):
        self.kind = kind
        self.capacity = capacity
        super().__init__(
            f"Sorry, capacity for this order type is already full ({capacity} orders). "
            "Please contact us directly."
        )


class OrderTemporarilyUnavailable(OrderSubmissionError):
    status_code = 503
    code = "try_again_later"
    default_message = "We could not save your order right now. Please try again in a moment."
