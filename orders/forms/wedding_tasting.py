from django import forms
from django.core.validators import RegexValidator

from orders.payloads import WeddingTastingDetails

from .base import ContactForm

phone_validator = RegexValidator(r"^[0-9+\s()-]+$", "Enter a valid phone number")


class WeddingTastingForm(ContactForm):
    phone = forms.CharField(
        max_length=50,
        min_length=9,
        validators=[phone_validator],
        error_messages={
            "required": "Phone is required",
            "min_length": "Phone must have at least 9 digits",
        },
    )
    cake_box = forms.BooleanField(required=False)
    sweetbar_box = forms.BooleanField(required=False)

    def clean(self):
        cleaned = super().clean()
        if not cleaned.get("cake_box") and not cleaned.get("sweetbar_box"):
            raise forms.ValidationError(
                "Choose at least one tasting box (cakes or sweetbar)",
                code="nothing_selected",
            )
        return cleaned

    def details(self) -> WeddingTastingDetails:
        return WeddingTastingDetails(
            cake_box=self.cleaned_data["cake_box"],
            sweetbar_box=self.cleaned_data["sweetbar_box"],
        )
