from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List

from django import forms
from django.utils import timezone

from orders.services.admission import Contact
from orders.services.blocked_dates import is_date_blocked


class ContactForm(forms.Form):
    """
    Customer contact block shared by every order form.
    Subclasses add their kind-specific fields and implement `details()`.
    """

    name = forms.CharField(
        max_length=255,
        min_length=2,
        error_messages={
            "required": "Name is required",
            "min_length": "Name must be at least 2 characters",
        },
    )
    email = forms.EmailField(
        max_length=255,
        error_messages={
            "required": "Email is required",
            "invalid": "Invalid email",
        },
    )
    phone = forms.CharField(
        max_length=50,
        min_length=9,
        error_messages={
            "required": "Phone is required",
            "min_length": "Phone must have at least 9 digits",
        },
    )

    def contact(self) -> Contact:
        data = self.cleaned_data
        return Contact(name=data["name"], email=data["email"].lower(), phone=data["phone"])

    def error_dict(self) -> Dict[str, List[str]]:
        return {field: [str(msg) for msg in messages] for field, messages in self.errors.items()}


class DeliveryDateMixin:
    """
    Adds a `date` field that must be at least `min_lead_days` ahead and not
    on a blocked day.
    """

    min_lead_days = 7

    def clean_date(self) -> date:
        day = self.cleaned_data["date"]
        earliest = timezone.localdate() + timedelta(days=self.min_lead_days)
        if day < earliest:
            raise forms.ValidationError(
                f"Delivery date must be at least {self.min_lead_days} days from today",
                code="too_soon",
            )
        if is_date_blocked(day):
            raise forms.ValidationError(
                "The selected date is not available. Please choose another date.",
                code="blocked",
            )
        return day


def delivery_date_field() -> forms.DateField:
    return forms.DateField(
        input_formats=["%Y-%m-%d"],
        error_messages={
            "required": "Delivery date is required",
            "invalid": "Enter the date as YYYY-MM-DD",
        },
    )
