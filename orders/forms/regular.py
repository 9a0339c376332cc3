from django import forms

from orders import catalog
from orders.payloads import RegularDetails

from .base import ContactForm, DeliveryDateMixin, delivery_date_field


class RegularOrderForm(DeliveryDateMixin, ContactForm):
    """
    Cake and/or dessert order. Photos travel separately as request.FILES.
    """

    min_lead_days = catalog.REGULAR_MIN_LEAD_DAYS

    date = delivery_date_field()
    order_cake = forms.BooleanField(required=False)
    order_dessert = forms.BooleanField(required=False)
    size = forms.CharField(max_length=100, required=False)
    flavor = forms.CharField(max_length=100, required=False)
    dessert_choice = forms.CharField(max_length=255, required=False)
    message = forms.CharField(max_length=2000, required=False)

    def clean(self):
        cleaned = super().clean()
        order_cake = cleaned.get("order_cake")
        order_dessert = cleaned.get("order_dessert")

        if not order_cake and not order_dessert:
            raise forms.ValidationError(
                "Choose at least one option: cake or dessert",
                code="nothing_selected",
            )
        if order_cake:
            if not cleaned.get("size"):
                self.add_error("size", "Cake size is required when ordering a cake")
            if not cleaned.get("flavor"):
                self.add_error("flavor", "Cake flavor is required when ordering a cake")
        if order_dessert and not cleaned.get("dessert_choice"):
            self.add_error("dessert_choice", "Choose your desserts")
        return cleaned

    def details(self) -> RegularDetails:
        data = self.cleaned_data
        return RegularDetails(
            order_cake=data["order_cake"],
            order_dessert=data["order_dessert"],
            cake_size=data.get("size"),
            cake_flavor=data.get("flavor"),
            cake_message=data.get("message"),
            dessert_choice=data.get("dessert_choice"),
        )
