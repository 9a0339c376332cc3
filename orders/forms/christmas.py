from django import forms

from orders import catalog
from orders.payloads import ChristmasSweetsDetails, ChristmasTastingDetails

from .base import ContactForm, DeliveryDateMixin, delivery_date_field


def quantity_field_name(sweet_id: str) -> str:
    return f"quantity_{sweet_id}"


class ChristmasSweetsForm(ContactForm):
    """
    One `quantity_<sweet id>` field per catalog sweet, in 100 g units.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for sweet in catalog.CHRISTMAS_SWEETS:
            self.fields[quantity_field_name(sweet.id)] = forms.IntegerField(
                min_value=0,
                max_value=catalog.CHRISTMAS_MAX_QUANTITY,
                required=False,
                label=sweet.name,
            )

    def quantities(self):
        return {
            sweet.id: self.cleaned_data.get(quantity_field_name(sweet.id)) or 0
            for sweet in catalog.CHRISTMAS_SWEETS
        }

    def clean(self):
        cleaned = super().clean()
        if any(name.startswith("quantity_") for name in self.errors):
            return cleaned

        details = ChristmasSweetsDetails.from_quantities(self.quantities())
        if not details.items:
            raise forms.ValidationError("Choose at least one kind of sweets", code="nothing_selected")
        if details.total < catalog.CHRISTMAS_MINIMUM_ORDER:
            raise forms.ValidationError(
                f"Minimum order value is {catalog.CHRISTMAS_MINIMUM_ORDER} CZK",
                code="below_minimum",
            )
        return cleaned

    def details(self) -> ChristmasSweetsDetails:
        return ChristmasSweetsDetails.from_quantities(self.quantities())


class ChristmasTastingForm(DeliveryDateMixin, ContactForm):
    min_lead_days = catalog.CHRISTMAS_TASTING_MIN_LEAD_DAYS

    date = delivery_date_field()
    cake_box_qty = forms.IntegerField(min_value=0, max_value=catalog.CHRISTMAS_TASTING_MAX_BOXES, required=False)
    sweetbar_box_qty = forms.IntegerField(min_value=0, max_value=catalog.CHRISTMAS_TASTING_MAX_BOXES, required=False)
    notes = forms.CharField(max_length=2000, required=False)

    def clean(self):
        cleaned = super().clean()
        if "cake_box_qty" in self.errors or "sweetbar_box_qty" in self.errors:
            return cleaned
        if not (cleaned.get("cake_box_qty") or 0) and not (cleaned.get("sweetbar_box_qty") or 0):
            self.add_error(
                "cake_box_qty",
                "Choose at least one tasting box (cakes or sweetbar)",
            )
        return cleaned

    def details(self) -> ChristmasTastingDetails:
        data = self.cleaned_data
        return ChristmasTastingDetails(
            cake_box_qty=data.get("cake_box_qty") or 0,
            sweetbar_box_qty=data.get("sweetbar_box_qty") or 0,
            notes=data.get("notes"),
        )
